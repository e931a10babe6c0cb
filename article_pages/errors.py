"""Exception taxonomy for article conversion failures."""

from __future__ import annotations


class ConversionError(RuntimeError):
    """Base class for failures that abort an article conversion."""


class SourceReadError(ConversionError):
    """Raised when the source article cannot be opened or decoded."""


class TemplateRenderError(ConversionError):
    """Raised when the page template cannot be loaded or rendered."""


class OutputWriteError(ConversionError):
    """Raised when the rendered HTML cannot be written to its destination."""


class ConfigError(ValueError):
    """Raised when the converter configuration is invalid or incomplete."""


__all__ = [
    "ConfigError",
    "ConversionError",
    "OutputWriteError",
    "SourceReadError",
    "TemplateRenderError",
]
