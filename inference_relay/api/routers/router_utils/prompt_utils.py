"""
Prompt validation helpers shared by the inference routers.

Dependencies: inference_relay.core
System role: Request payload validation
"""

from inference_relay.core.exceptions import ValidationError
from inference_relay.core.sanitizer import sanitize


def require_prompt(message: str | None) -> str:
    """
    Validate presence of a prompt and sanitize it.

    Args:
        message: Raw message from the request body

    Returns:
        str: Sanitized, non-empty prompt

    Raises:
        ValidationError: If the prompt is missing, too long, or empty once sanitized
    """
    if not message:
        raise ValidationError("Prompt is required", field="message")

    prompt = sanitize(message)
    if not prompt:
        raise ValidationError("Prompt is empty after sanitization", field="message")
    return prompt
