"""Router helper utilities."""

from .prompt_utils import require_prompt

__all__ = ["require_prompt"]
