"""HTML parsers for VK authorize and post-login pages."""

from .form import extract_login_form, has_secondary_login_form, parse_document
from .redirect import ExtractionKind, TokenExtraction, extract_token, find_redirect_url, parse_seconds

__all__ = [
    "parse_document",
    "extract_login_form",
    "has_secondary_login_form",
    "ExtractionKind",
    "TokenExtraction",
    "extract_token",
    "find_redirect_url",
    "parse_seconds",
]
