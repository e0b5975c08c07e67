"""
Post-processing applied to raw model output.

Dependencies: re (stdlib)
System role: Normalizes generated text before agents use it
"""

import re

_CODE_FENCE = re.compile(r"```(?:python|py)?[ \t]*\n?", re.IGNORECASE)


def strip_text(text: str) -> str:
    """Trim surrounding whitespace."""
    return text.strip()


def strip_code_fences(text: str) -> str:
    """
    Remove markdown code-fence markers and trim.

    Models are told to return bare code but often wrap it in a fenced
    block anyway, with or without a language tag.

    Args:
        text: Raw model output

    Returns:
        str: Executable source
    """
    return _CODE_FENCE.sub("", text).strip()


def normalize_label(text: str) -> str:
    """Trim and upper-case a classification label."""
    return text.strip().upper()
