"""
Text normalization shared by every lookup path.

Keys, synonyms, employee names and queries all go through the same
function so that comparisons line up exactly.
"""
from typing import Optional


def normalize(text: Optional[str]) -> str:
    """
    Trim surrounding whitespace and lowercase.

    :param text: Raw text (None is treated as empty)
    :return: Normalized text
    """
    if text is None:
        return ""
    return text.strip().lower()
