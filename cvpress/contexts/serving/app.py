"""
HTTP Surface

Flask application exposing the generation pipeline:

    GET  /health        liveness probe
    POST /generate-pdf  JSON payload in, application/pdf out

Failures never escape a request: validation problems return 400 and every
pipeline failure returns 500, both as {"error": ..., "message": ...}.
"""

import os
import time
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, g, jsonify, make_response, request
from flask_cors import CORS
from loguru import logger
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.utils import secure_filename

from cvpress.contexts.serving.logger import (
    _log_info,
    log_request,
    setup_serving_logger,
)
from cvpress.contexts.serving.pipeline import TEMP_PATH, GenerationRequest, generate_pdf
from cvpress.contexts.templating import ValidationError
from cvpress.utils.exceptions import CvpressError
from cvpress.utils.timestamp import now

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
MAX_CONTENT_LENGTH_MB = int(os.getenv("MAX_CONTENT_LENGTH_MB", "10"))

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


def _error_response(error: str, message: str, status: int):
    return jsonify({"error": error, "message": message}), status


def create_app(temp_path: Optional[Path] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        temp_path: Transient working directory, created if missing
                   (defaults to TEMP_PATH from environment)

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    CORS(app, origins="*", send_wildcard=True)

    app.config["MAX_CONTENT_LENGTH"] = MAX_CONTENT_LENGTH_MB * 1024 * 1024

    temp_path = Path(temp_path or TEMP_PATH)
    temp_path.mkdir(parents=True, exist_ok=True)
    app.config["TEMP_PATH"] = temp_path

    @app.before_request
    def start_timer():
        g.start_time = time.time()

    @app.after_request
    def finish_request(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        elapsed = time.time() - g.get("start_time", time.time())
        log_request(request.remote_addr or "-", request.method, request.path, response.status_code, elapsed)
        return response

    @app.errorhandler(RequestEntityTooLarge)
    def payload_too_large(e):
        return _error_response(
            "Payload too large", f"Request body exceeds {MAX_CONTENT_LENGTH_MB}MB", 413
        )

    @app.get("/health")
    def health():
        return jsonify({"status": "ok", "message": "PDF generation server is running"}), 200

    @app.post("/generate-pdf")
    async def generate_pdf_route():
        payload = request.get_json(silent=True)

        try:
            generation_request = GenerationRequest.from_payload(payload)
        except ValidationError as e:
            label = "Missing required fields" if e.missing_fields else "Invalid request"
            return _error_response(label, e.message, 400)
        except CvpressError as e:
            return _error_response("Failed to generate PDF", e.message, 500)

        try:
            result = await generate_pdf(generation_request, artifacts_dir=app.config["TEMP_PATH"])
        except CvpressError as e:
            return _error_response("Failed to generate PDF", e.message, 500)
        except Exception as e:
            logger.exception(f"Unexpected failure for template {generation_request.template_id}")
            return _error_response("Failed to generate PDF", str(e), 500)

        filename = secure_filename(f"resume-{generation_request.template_id}.pdf") or "resume.pdf"
        response = make_response(result.pdf_bytes)
        response.headers["Content-Type"] = "application/pdf"
        response.headers["Content-Disposition"] = f"attachment; filename={filename}"
        response.headers["Content-Length"] = str(len(result.pdf_bytes))
        return response

    return app


def run_server(host: str = HOST, port: int = PORT, log_dir: Optional[Path] = None) -> None:
    """
    Run the development server with file + console logging.

    Args:
        host: Interface to bind
        port: Port to listen on
        log_dir: Session log directory (default: LOGS_PATH/serve_<timestamp>)
    """
    log_dir = log_dir or LOGS_PATH / f"serve_{now()}"
    setup_serving_logger(log_dir, extra_provenance={"Host": host, "Port": port})

    app = create_app()
    _log_info(f"PDF generation server running on {host}:{port}")
    app.run(host=host, port=port, threaded=True)
