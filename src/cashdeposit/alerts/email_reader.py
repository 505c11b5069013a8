#!/usr/bin/env python3
"""
Alert Email Reader

Reads saved deposit alert emails from disk.

Supports:
- .eml files (full RFC 822 messages, as saved by most mail clients)
- .html / .htm / .txt files holding just the message body
"""

import email
import email.header
import email.message
import email.utils
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

BODY_FILE_SUFFIXES = {".html", ".htm", ".txt"}
MESSAGE_FILE_SUFFIXES = {".eml"}
SUPPORTED_SUFFIXES = BODY_FILE_SUFFIXES | MESSAGE_FILE_SUFFIXES


@dataclass
class AlertEmail:
    """A deposit alert email as read from disk."""

    message_id: str
    subject: str
    sender: str
    date: datetime
    html_content: str | None = None
    text_content: str | None = None
    source_path: Path | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def body(self) -> str:
        """The body handed to the segmenter: HTML if present, else plain text."""
        return self.html_content or self.text_content or ""


def _file_mtime(path: Path) -> datetime:
    return datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)


def _decode_header(header: str) -> str:
    """Decode an RFC 2047 encoded header."""
    if not header:
        return ""

    try:
        decoded_parts = []
        for part, encoding in email.header.decode_header(header):
            if isinstance(part, bytes):
                decoded_parts.append(part.decode(encoding or "utf-8", errors="ignore"))
            else:
                decoded_parts.append(str(part))
        return "".join(decoded_parts)
    except (LookupError, ValueError) as e:
        logger.warning(f"Error decoding header {header}: {e}")
        return header


def _decode_payload(part: email.message.Message) -> str | None:
    payload = part.get_payload(decode=True)
    if not payload or not isinstance(payload, bytes):
        return None
    charset = part.get_content_charset() or "utf-8"
    try:
        return payload.decode(charset, errors="ignore")
    except LookupError:
        return payload.decode("utf-8", errors="ignore")


def _extract_email_content(msg: email.message.Message) -> tuple[str | None, str | None]:
    """Extract the first HTML and plain text bodies, skipping attachments."""
    html_content = None
    text_content = None

    parts = msg.walk() if msg.is_multipart() else [msg]
    for part in parts:
        if "attachment" in str(part.get("Content-Disposition", "")):
            continue

        content_type = part.get_content_type()
        if content_type == "text/html" and html_content is None:
            html_content = _decode_payload(part)
        elif content_type == "text/plain" and text_content is None:
            text_content = _decode_payload(part)

    return html_content, text_content


def parse_alert_message(raw: bytes, source_path: Path | None = None) -> AlertEmail:
    """
    Parse raw RFC 822 bytes into an AlertEmail.

    The Date header gives the received date; if it is missing or malformed
    the file modification time (or now, with no file) is used instead.
    """
    msg = email.message_from_bytes(raw)

    date_str = msg.get("Date", "")
    try:
        email_date = email.utils.parsedate_to_datetime(date_str)
    except (TypeError, ValueError):
        logger.debug(f"Unparseable Date header '{date_str}', falling back to file time")
        email_date = _file_mtime(source_path) if source_path else datetime.now(timezone.utc)

    html_content, text_content = _extract_email_content(msg)

    return AlertEmail(
        message_id=msg.get("Message-ID", source_path.name if source_path else ""),
        subject=_decode_header(msg.get("Subject", "")),
        sender=_decode_header(msg.get("From", "")),
        date=email_date,
        html_content=html_content,
        text_content=text_content,
        source_path=source_path,
        metadata={"size": len(raw)},
    )


def load_alert_email(path: str | Path) -> AlertEmail:
    """
    Load an alert email from a saved message or body file.

    Args:
        path: Path to a .eml, .html, .htm or .txt file

    Returns:
        AlertEmail

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file type is not supported
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Email file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported email file type '{suffix}' (expected one of {sorted(SUPPORTED_SUFFIXES)})")

    if suffix in MESSAGE_FILE_SUFFIXES:
        alert = parse_alert_message(path.read_bytes(), source_path=path)
    else:
        content = path.read_text(encoding="utf-8", errors="ignore")
        is_html = suffix != ".txt"
        alert = AlertEmail(
            message_id=path.name,
            subject=path.stem,
            sender="",
            date=_file_mtime(path),
            html_content=content if is_html else None,
            text_content=None if is_html else content,
            source_path=path,
            metadata={"size": len(content)},
        )

    logger.info(f"Loaded alert email '{alert.subject}' from {path.name}")
    return alert
