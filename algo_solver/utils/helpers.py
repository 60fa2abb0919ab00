"""
Common utility functions.
"""

CODE_FENCE = "```"


def clean_code_response(raw_text: str) -> str:
    """
    Strip markdown code fences and surrounding whitespace from LLM output.

    The opening fence line (including any language tag such as ```python) is
    only removed when a newline follows it. A single-line fenced reply is
    returned trimmed but otherwise untouched.

    Args:
        raw_text: Text returned by the model

    Returns:
        Source code ready to compile
    """
    text = raw_text.strip()
    if text.startswith(CODE_FENCE):
        first_newline = text.find("\n")
        if first_newline != -1:
            text = text[first_newline + 1 :]
            if text.endswith(CODE_FENCE):
                text = text[: -len(CODE_FENCE)]
    return text.strip()


def truncate(text: str, limit: int = 500) -> str:
    """Shorten text for log lines."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} chars)"
