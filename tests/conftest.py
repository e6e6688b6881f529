"""Shared fixtures for CVPRESS tests."""

import copy

import pytest

STANDARD_TEMPLATE = {
    "id": "modern-blue",
    "name": "Modern Blue",
    "colors": {
        "primary": "#2563eb",
        "secondary": "#475569",
        "accent": "#0ea5e9",
        "background": "#ffffff",
        "text": "#1e293b",
    },
    "fontFamily": "'Inter', sans-serif",
    "layout": "standard",
}


@pytest.fixture
def template_dict():
    """A fully populated standard-layout template payload."""
    return copy.deepcopy(STANDARD_TEMPLATE)


@pytest.fixture
def payload(template_dict):
    """A minimal valid /generate-pdf request body."""
    return {
        "resumeData": {
            "content": "# Hi",
            "keywords": ["X"],
            "template": template_dict,
        },
        "templateId": template_dict["id"],
    }
