"""
Prompt and session identifier sanitization.

Pure string transforms applied to caller input before it is forwarded
upstream.

Dependencies: html, re (stdlib)
System role: Input cleaning at the trust boundary
"""

import html
import re

from inference_relay.core.exceptions import ValidationError

MAX_PROMPT_LENGTH = 2048
SESSION_ID_MIN_LENGTH = 2
SESSION_ID_MAX_LENGTH = 100

_STRIPPED_CHARS = re.compile(r"[<>;&|]")
_SESSION_ID_DISALLOWED = re.compile(r"[^0-9A-Za-z._:-]")
_SESSION_ID_PATTERN = re.compile(r"[0-9A-Za-z._:-]+")


def sanitize(prompt: str) -> str:
    """
    Sanitize a prompt before sending it upstream.

    Steps, in order:
    1. Trim leading and trailing whitespace
    2. Lowercase
    3. Remove the characters < > ; & |
    4. Escape HTML entities (&, <, >)
    5. Reject prompts longer than MAX_PROMPT_LENGTH

    Step 4 cannot match anything once step 3 has run; the order is fixed.

    Args:
        prompt: Raw prompt text

    Returns:
        str: Sanitized prompt

    Raises:
        ValidationError: If the sanitized prompt is too long
    """
    sanitized = _STRIPPED_CHARS.sub("", prompt.strip().lower())
    sanitized = html.escape(sanitized, quote=False)

    if len(sanitized) > MAX_PROMPT_LENGTH:
        raise ValidationError(
            "Prompt is too long",
            field="message",
            details={"length": len(sanitized), "max_length": MAX_PROMPT_LENGTH},
        )
    return sanitized


def sanitize_session_id(session_id: str | None) -> str:
    """Drop every character outside [0-9A-Za-z._:-]. Never raises."""
    if not session_id:
        return ""
    return _SESSION_ID_DISALLOWED.sub("", session_id)


def is_valid_session_id(session_id: str) -> bool:
    """Check the pattern and 2-100 length bounds accepted by the retrieval upstream."""
    return (
        SESSION_ID_MIN_LENGTH <= len(session_id) <= SESSION_ID_MAX_LENGTH
        and _SESSION_ID_PATTERN.fullmatch(session_id) is not None
    )
