"""
Completion prediction for the word being typed and the word after it.

Three tiers, tried in order by the engine; the first hit wins:
1. curated prefix table for the current word
2. dictionary suggestions that extend the current word
3. phrase / next-word prediction at a word boundary
"""
from typing import Callable, Dict, List, Optional, Sequence

from spellcomplete.schemas.spellcheck import AutocompleteSuggestion, WordToken
from spellcomplete.services.lexicon import (
    COMMON_COMPLETIONS,
    NEXT_WORD_PREDICTIONS,
    PHRASE_COMPLETIONS,
    PHRASE_PAIRS,
)
from spellcomplete.services.ranker import match_capitalization
from spellcomplete.services.tokenizer import is_letter


class CompletionPredictor:
    """Produces at most one completion per tier from static tables and suggestions."""

    def __init__(
        self,
        prefix_table: Optional[Dict[str, List[str]]] = None,
        phrase_pairs: Optional[Dict[str, List[str]]] = None,
        phrase_completions: Optional[Dict[str, List[str]]] = None,
        next_word_predictions: Optional[Dict[str, List[str]]] = None,
        min_prefix_length: int = 2,
        min_dictionary_length: int = 3,
    ):
        self.prefix_table = COMMON_COMPLETIONS if prefix_table is None else prefix_table
        self.phrase_pairs = PHRASE_PAIRS if phrase_pairs is None else phrase_pairs
        self.phrase_completions = PHRASE_COMPLETIONS if phrase_completions is None else phrase_completions
        self.next_word_predictions = (
            NEXT_WORD_PREDICTIONS if next_word_predictions is None else next_word_predictions
        )
        self.min_prefix_length = min_prefix_length
        self.min_dictionary_length = min_dictionary_length

    def complete_from_table(self, token: WordToken) -> Optional[AutocompleteSuggestion]:
        """
        Tier 1: curated completion for the current word.

        Args:
            token: Current word

        Returns:
            AutocompleteSuggestion or None
        """
        word = token.text
        if len(word) < self.min_prefix_length:
            return None

        lowered = word.lower()
        for prefix, completions in self.prefix_table.items():
            if not lowered.startswith(prefix):
                continue
            for completion in completions:
                if completion.lower().startswith(lowered) and len(completion) > len(word):
                    return _in_word_completion(token, completion)
        return None

    def complete_from_suggestions(
        self,
        token: WordToken,
        suggestions: Sequence[str],
    ) -> Optional[AutocompleteSuggestion]:
        """
        Tier 2: first dictionary suggestion that extends the current word.

        Only meaningful for unrecognized words; the engine checks that.

        Args:
            token: Current word
            suggestions: Locale suggestions in gathered order

        Returns:
            AutocompleteSuggestion or None
        """
        word = token.text
        if len(word) < self.min_dictionary_length:
            return None

        lowered = word.lower()
        for suggestion in suggestions:
            if suggestion.lower().startswith(lowered) and len(suggestion) > len(word):
                return _in_word_completion(token, suggestion)
        return None

    def predict_phrase(
        self,
        text: str,
        caret: int,
        tokens: Sequence[WordToken],
        is_recognized: Callable[[str], bool],
    ) -> Optional[AutocompleteSuggestion]:
        """
        Tier 3: continuation after the last completed word.

        The caret must sit at a boundary: after whitespace that follows a
        word, or at the end of the buffer right after a recognized word (the
        prediction then starts with a space). The two-word phrase table is
        looked up first, then phrase completions, then next-word predictions.

        Args:
            text: Buffer
            caret: Clamped caret offset
            tokens: All tokens of the buffer
            is_recognized: Whether a word counts as complete and correct

        Returns:
            Insertion at the caret, or None
        """
        if is_letter(text[caret:caret + 1]):
            return None

        before = [token for token in tokens if token.end_index <= caret]
        if not before:
            return None

        last = before[-1]
        gap = text[last.end_index:caret]
        if gap:
            if not gap.isspace():
                return None
            separator = ""
        else:
            if caret != len(text) or not is_recognized(last.text):
                return None
            separator = " "

        keys = [last.text.lower()]
        if len(before) > 1:
            previous = before[-2]
            between = text[previous.end_index:last.start_index]
            if between and between.isspace():
                keys.insert(0, f"{previous.text.lower()} {keys[0]}")

        candidates = None
        if len(keys) == 2:
            candidates = self.phrase_pairs.get(keys[0])
        if not candidates:
            candidates = self.phrase_completions.get(keys[-1])
        if not candidates:
            candidates = self.next_word_predictions.get(keys[-1])
        if not candidates:
            return None

        completion = separator + candidates[0]
        return AutocompleteSuggestion(
            original="",
            completion=completion,
            remaining_text=completion,
            start_index=caret,
            end_index=caret,
        )


def _in_word_completion(token: WordToken, completion: str) -> AutocompleteSuggestion:
    completion = match_capitalization(token.text, completion)
    return AutocompleteSuggestion(
        original=token.text,
        completion=completion,
        remaining_text=completion[len(token.text):],
        start_index=token.start_index,
        end_index=token.end_index,
    )
