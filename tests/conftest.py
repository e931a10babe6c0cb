"""Shared pytest fixtures for article_pages tests."""

from __future__ import annotations

import pytest

from article_pages.logs import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Route structlog output to stderr at WARNING so stdout stays clean."""
    configure_logging("WARNING")


@pytest.fixture
def sample_article() -> list[str]:
    """Return a representative article exercising every block type."""
    return [
        "Minimega exposes a JSON API.",
        "",
        "* Overview",
        "The API accepts <commands> and returns results.",
        "",
        "** Requests",
        "- first option",
        "- second option",
        "",
        "** responses",
        "\tcurl http://localhost:9001/vms",
        "\techo <done>",
        "",
        "",
        "* Errors",
        "Errors are reported in the response body.",
    ]
