"""
Word tokenization for English and Spanish text.

Tokens are maximal runs of ASCII or Latin-1 accented letters. Numbers,
punctuation and symbols separate tokens and are never analyzed.
"""
import re
from typing import List, Optional

from spellcomplete.schemas.spellcheck import WordToken
from spellcomplete.services.lexicon import IGNORE_WORDS


# ASCII letters plus Latin-1 accented letters (á, é, ñ, ü, ç, ...),
# excluding the multiplication and division signs.
LETTERS = "A-Za-zÀ-ÖØ-öø-ÿ"
WORD_PATTERN = re.compile(f"[{LETTERS}]+")
TRAILING_WORD_PATTERN = re.compile(f"[{LETTERS}]+$")
LETTER_PATTERN = re.compile(f"[{LETTERS}]")


def tokenize(text: str) -> List[WordToken]:
    """
    Split text into word tokens in a single left-to-right pass.

    Args:
        text: Buffer to scan

    Returns:
        Non-overlapping tokens in buffer order
    """
    return [
        WordToken(text=match.group(), start_index=match.start(), end_index=match.end())
        for match in WORD_PATTERN.finditer(text)
    ]


def is_ignored(word: str, min_length: int = 1) -> bool:
    """
    Check whether a token is structurally excluded from spell-checking.

    Excluded tokens: too short, listed in IGNORE_WORDS, acronyms (all caps,
    more than one letter), camelCase identifiers and anything with a digit.

    Args:
        word: Token text
        min_length: Tokens shorter than this are ignored

    Returns:
        True if the token must not be checked
    """
    if len(word) < min_length:
        return True
    if word.lower() in IGNORE_WORDS:
        return True
    if len(word) > 1 and word == word.upper():
        return True
    if any(c.isupper() for c in word[1:]) and any(c.islower() for c in word):
        return True
    if any(c.isdigit() for c in word):
        return True
    return False


def current_word_start(text: str, caret: int) -> Optional[int]:
    """Start offset of the letter run ending exactly at the caret, if any."""
    match = TRAILING_WORD_PATTERN.search(text[:caret])
    if match is None:
        return None
    return match.start()


def is_current_word(token: WordToken, text: str, caret: int) -> bool:
    """A token is the current word when it spans [current_word_start, caret)."""
    if token.end_index != caret:
        return False
    return token.start_index == current_word_start(text, caret)


def is_letter(char: str) -> bool:
    return bool(char) and LETTER_PATTERN.fullmatch(char) is not None


def word_ending_at(text: str, offset: int) -> Optional[WordToken]:
    """
    Find the word that ends exactly at an offset.

    The letter run must stop at the offset; a caret inside a word does
    not identify a word.

    Args:
        text: Buffer to inspect
        offset: Offset the word must end at (clamped to the text)

    Returns:
        WordToken for the word, or None
    """
    offset = max(0, min(offset, len(text)))
    if is_letter(text[offset:offset + 1]):
        return None

    start = current_word_start(text, offset)
    if start is None:
        return None
    return WordToken(text=text[start:offset], start_index=start, end_index=offset)
