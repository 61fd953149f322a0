"""Download filename helpers."""

import re

_HEADER_UNSAFE_RE = re.compile(r'["\r\n\\;/]')
_NON_PRINTABLE_ASCII_RE = re.compile(r"[^\x20-\x7e]")


def document_filename(stem: str, max_length: int = 120) -> str:
    """Build a PDF filename safe for a Content-Disposition header.

    Strips characters that could break out of the quoted filename and any
    non-printable or non-ASCII characters, replaces spaces with underscores,
    and caps the stem length.

    Args:
        stem: Filename without extension (e.g., a reference number).
        max_length: Maximum stem length.

    Returns:
        Sanitized filename ending in ".pdf".
    """
    safe = _HEADER_UNSAFE_RE.sub("", stem)
    safe = _NON_PRINTABLE_ASCII_RE.sub("", safe)
    safe = safe.strip().replace(" ", "_")[:max_length]
    if not safe:
        safe = "document"
    return f"{safe}.pdf"
