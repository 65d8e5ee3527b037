"""Fixed-length codepoint windows over text."""

from typing import Iterator


def char_windows(text: str, size: int) -> Iterator[str]:
    """
    Yield every substring of ``size`` codepoints, one per start offset.

    Start offsets with fewer than ``size`` codepoints remaining are skipped,
    so the i-th window yielded always begins at codepoint offset i.

    Args:
        text: Text to slide over
        size: Window length in codepoints

    Returns:
        Iterator over the windows, left to right
    """
    if size <= 0:
        return
    for start in range(len(text) - size + 1):
        yield text[start:start + size]
