"""Validation shared by the note and comment use cases."""

MAX_CONTENT_LENGTH = 1000


def normalize_content(content: str | None) -> str:
    """Return trimmed content or raise ``ValueError`` when unusable."""

    text = (content or "").strip()
    if not text:
        raise ValueError("Enter some content.")
    if len(text) > MAX_CONTENT_LENGTH:
        raise ValueError(f"Content must be at most {MAX_CONTENT_LENGTH} characters")
    return text
