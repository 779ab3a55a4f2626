"""Text helpers for extracted documents."""

__all__ = [
    "summarize_text",
    "text_metadata",
]


def summarize_text(text: str, max_length: int = 500) -> str:
    """Get the first max_length characters, with an ellipsis when cut."""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def text_metadata(text: str) -> dict[str, int]:
    """Count characters, words, lines and paragraphs in text.

    Args:
        text: Text to measure

    Returns:
        Dict with character_count, word_count, line_count, paragraph_count
    """
    return {
        "character_count": len(text),
        "word_count": len(text.split()),
        "line_count": len(text.split("\n")),
        "paragraph_count": len(text.split("\n\n")),
    }
