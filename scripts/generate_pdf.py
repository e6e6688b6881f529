#!/usr/bin/env python3
"""
PDF Generation CLI

Composes resume payloads into HTML, renders them to PDF, and runs the HTTP server.

Commands:
    render - Render a request payload (JSON or YAML) to a PDF file
    html   - Compose a request payload into an HTML file without rendering
    serve  - Run the PDF generation server

Examples:\n

    generate_pdf.py render request.json -o resume.pdf        # Render to PDF

    generate_pdf.py html request.yaml -o resume.html         # Inspect composed HTML

    generate_pdf.py serve --port 3000                        # Start the server
"""

import asyncio
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from cvpress.contexts.rendering.logger import setup_rendering_logger
from cvpress.contexts.serving import GenerationRequest, generate_pdf
from cvpress.contexts.serving.app import HOST, PORT, run_server
from cvpress.contexts.templating import compose_document
from cvpress.utils.exceptions import CvpressError
from cvpress.utils.timestamp import now

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path.cwd()))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(path.resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


def load_payload(payload_file: Path) -> Dict[str, Any]:
    """
    Load a generation payload from JSON or YAML.

    JSON is read verbatim. YAML interpolations are left unresolved so "${...}"
    in resume text stays literal.
    """
    if payload_file.suffix.lower() == ".json":
        return json.loads(payload_file.read_text(encoding="utf-8"))
    return OmegaConf.to_container(OmegaConf.load(payload_file), resolve=False)


app = typer.Typer(
    help="Render resume payloads to HTML/PDF and serve the PDF generation API",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    payload_file: Annotated[
        Path,
        typer.Argument(help="Request payload (JSON or YAML) with resumeData and templateId", exists=True),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF path (default: <payload>.pdf)"),
    ] = None,
    wrap_lists: Annotated[
        bool,
        typer.Option("--wrap-lists", help="Wrap list items in <ul> elements"),
    ] = False,
    keep_html: Annotated[
        bool,
        typer.Option("--keep-html", "-k", help="Keep the composed HTML in the temp directory"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug messages on the console"),
    ] = False,
):
    """
    Render a request payload to PDF.

    Examples:\n

        $ generate_pdf.py render request.json                  # Writes request.pdf

        $ generate_pdf.py render request.json -o out/cv.pdf    # Custom output path
    """
    output = output or payload_file.with_suffix(".pdf")

    typer.secho(f"\nRendering: {display_path(payload_file)}", fg=typer.colors.BLUE, bold=True)
    setup_rendering_logger(LOGS_PATH / f"render_{now()}", verbose=verbose)

    try:
        request = GenerationRequest.from_payload(load_payload(payload_file))
        result = asyncio.run(generate_pdf(request, wrap_lists=wrap_lists, keep_html=keep_html))
    except CvpressError as e:
        typer.secho(f"\n✗ Generation failed: {e}\n", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(result.pdf_bytes)

    typer.secho("\n✓ Generation succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Pages: {result.page_count if result.page_count is not None else '?'}")
    typer.echo(f"  Time: {result.render_time_s:.2f}s")
    typer.echo(f"  PDF: {display_path(output)}")
    typer.echo("")


@app.command("html")
def html_command(
    payload_file: Annotated[
        Path,
        typer.Argument(help="Request payload (JSON or YAML) with resumeData and templateId", exists=True),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output HTML path (default: <payload>.html)"),
    ] = None,
    wrap_lists: Annotated[
        bool,
        typer.Option("--wrap-lists", help="Wrap list items in <ul> elements"),
    ] = False,
):
    """
    Compose a request payload into HTML without launching a browser.

    Examples:\n

        $ generate_pdf.py html request.json -o preview.html
    """
    output = output or payload_file.with_suffix(".html")

    try:
        request = GenerationRequest.from_payload(load_payload(payload_file))
        html = compose_document(request.resume_data, request.template, wrap_lists=wrap_lists)
    except CvpressError as e:
        typer.secho(f"\n✗ Composition failed: {e}\n", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    typer.secho(f"✓ HTML written to {display_path(output)}", fg=typer.colors.GREEN)


@app.command("serve")
def serve_command(
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = HOST,
    port: Annotated[int, typer.Option("--port", "-p", help="Port to listen on")] = PORT,
):
    """
    Run the PDF generation server.

    Examples:\n

        $ generate_pdf.py serve                      # 0.0.0.0:3000

        $ generate_pdf.py serve --port 8080
    """
    run_server(host=host, port=port)


if __name__ == "__main__":
    app()
