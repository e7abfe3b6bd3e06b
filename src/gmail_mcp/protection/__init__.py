"""Structural prompt injection protection for untrusted email content."""

from gmail_mcp.protection.boundary import generate_boundary
from gmail_mcp.protection.html import strip_html
from gmail_mcp.protection.preamble import build_security_context
from gmail_mcp.protection.sanitizer import (
    UNTRUSTED_FIELDS,
    sanitize,
    sanitize_record,
    sanitize_records,
    truncate,
    wrap,
)

__all__ = [
    "UNTRUSTED_FIELDS",
    "build_security_context",
    "generate_boundary",
    "sanitize",
    "sanitize_record",
    "sanitize_records",
    "strip_html",
    "truncate",
    "wrap",
]
