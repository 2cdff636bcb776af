"""
Caret-preserving text rewriting.

Edits are applied in descending start order so the offsets of edits that
come earlier in the buffer stay valid while later ones are replaced.
"""
from typing import List, Optional, Sequence, Tuple

from spellcomplete.schemas.spellcheck import AutocompleteSuggestion, MisspelledWord, TextEdit


def corrections_to_edits(misspelled_words: Sequence[MisspelledWord]) -> List[TextEdit]:
    """Edits for every misspelled word that has a best suggestion."""
    return [
        TextEdit(
            start_index=word.start_index,
            end_index=word.end_index,
            replacement=word.best_suggestion,
        )
        for word in misspelled_words
        if word.best_suggestion
    ]


def _validate(text: str, edits: List[TextEdit]) -> None:
    previous_end = -1
    for edit in sorted(edits, key=lambda e: (e.start_index, e.end_index)):
        if edit.start_index < 0 or edit.end_index > len(text) or edit.start_index > edit.end_index:
            raise ValueError(
                f"Edit range [{edit.start_index}, {edit.end_index}) outside text of length {len(text)}"
            )
        if edit.start_index < previous_end:
            raise ValueError(f"Overlapping edit at [{edit.start_index}, {edit.end_index})")
        previous_end = max(previous_end, edit.end_index)


def shift_caret(caret: int, edit: TextEdit) -> int:
    """
    Move a caret across one edit.

    A caret after the edited range shifts by the length change; a caret
    inside the range (ends included) lands right after the replacement.
    """
    replacement_length = len(edit.replacement)
    if caret > edit.end_index:
        return caret + replacement_length - (edit.end_index - edit.start_index)
    if edit.start_index <= caret <= edit.end_index:
        return edit.start_index + replacement_length
    return caret


def apply_edits(
    text: str,
    edits: Sequence[TextEdit],
    caret: Optional[int] = None,
) -> Tuple[str, Optional[int]]:
    """
    Apply non-overlapping edits and move the caret with them.

    Args:
        text: Original buffer
        edits: Edits with pairwise disjoint ranges
        caret: Caret offset in the original buffer (None to skip tracking)

    Returns:
        Tuple of (new text, new caret or None)

    Raises:
        ValueError: If edits overlap or fall outside the text
    """
    edits = list(edits)
    _validate(text, edits)

    for edit in sorted(edits, key=lambda e: e.start_index, reverse=True):
        if caret is not None:
            caret = shift_caret(caret, edit)
        text = text[:edit.start_index] + edit.replacement + text[edit.end_index:]

    if caret is not None:
        caret = max(0, min(caret, len(text)))
    return text, caret


def apply_all_corrections(text: str, misspelled_words: Sequence[MisspelledWord]) -> str:
    """
    Replace every misspelled word with its best suggestion.

    Args:
        text: Buffer the words were found in
        misspelled_words: Analysis results for that buffer

    Returns:
        Corrected text (unchanged when nothing has a suggestion)
    """
    corrected, _ = apply_edits(text, corrections_to_edits(misspelled_words))
    return corrected


def apply_autocomplete(text: str, autocomplete: AutocompleteSuggestion) -> str:
    """Substitute the completion for its range."""
    edit = TextEdit(
        start_index=autocomplete.start_index,
        end_index=autocomplete.end_index,
        replacement=autocomplete.completion,
    )
    corrected, _ = apply_edits(text, [edit])
    return corrected
