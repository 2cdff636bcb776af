"""
Conversion between Python string indices and UTF-16 code-unit offsets.

Host text widgets (browsers, Electron) report caret positions in UTF-16 code
units, while Python strings index by code point. The two only differ for
characters outside the Basic Multilingual Plane, which take two code units.
"""


def _units(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def utf16_to_index(text: str, offset: int) -> int:
    """
    Convert a UTF-16 offset into a Python string index.

    Offsets are clamped to the text. An offset pointing between the two
    halves of a surrogate pair resolves to the start of that character.

    Args:
        text: Text the offset refers to
        offset: UTF-16 code-unit offset

    Returns:
        Python string index in [0, len(text)]
    """
    if offset <= 0:
        return 0

    units = 0
    for index, char in enumerate(text):
        width = _units(char)
        if units + width > offset:
            return index
        units += width
    return len(text)


def index_to_utf16(text: str, index: int) -> int:
    """
    Convert a Python string index into a UTF-16 offset.

    Args:
        text: Text the index refers to
        index: Python string index (clamped to the text)

    Returns:
        UTF-16 code-unit offset
    """
    index = max(0, min(index, len(text)))
    return sum(_units(char) for char in text[:index])
