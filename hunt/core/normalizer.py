"""
Answer normalization

Matching is exact equality after trimming surrounding whitespace and
lowercasing, applied to both the submitted text and every accepted answer.
"""
from typing import Iterable, Optional


def normalize_answer(text: Optional[str]) -> str:
    """
    Normalize a raw answer

    Args:
        text: Raw user input (may be None)

    Returns:
        Trimmed, lowercased string ("" for None)

    Example:
        >>> normalize_answer("  PaRiS ")
        'paris'
    """
    if text is None:
        return ""
    return text.strip().lower()


def is_blank(text: Optional[str]) -> bool:
    return not normalize_answer(text)


def matches_any(raw_answer: str, accepted_answers: Iterable[str]) -> bool:
    """Return True if the answer equals any accepted answer once both are normalized"""
    normalized = normalize_answer(raw_answer)
    return any(normalize_answer(answer) == normalized for answer in accepted_answers)
