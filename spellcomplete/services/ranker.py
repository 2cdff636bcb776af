"""
Suggestion ranking across locales.
"""
from typing import List, Optional, Sequence, Set, Tuple

from spellcomplete.config import settings
from spellcomplete.services.dictionary_base import LocaleDictionary


def match_capitalization(word: str, candidate: str) -> str:
    """Capitalize the candidate when the typed word starts uppercase."""
    if word[:1].isupper():
        return candidate[:1].upper() + candidate[1:]
    return candidate


class SuggestionRanker:
    """
    Combines suggestions from every locale and picks one best guess.

    Score per candidate: a bonus when its first letter matches the word's,
    a penalty per character of length difference, and a bonus when a
    non-primary locale suggested it. Ties keep the gathered order.
    """

    def __init__(
        self,
        first_letter_bonus: Optional[int] = None,
        length_penalty: Optional[int] = None,
        secondary_locale_bonus: Optional[int] = None,
        per_locale: Optional[int] = None,
        max_suggestions: Optional[int] = None,
    ):
        self.first_letter_bonus = (
            settings.SPELLCHECK_RANK_FIRST_LETTER_BONUS if first_letter_bonus is None else first_letter_bonus
        )
        self.length_penalty = (
            settings.SPELLCHECK_RANK_LENGTH_PENALTY if length_penalty is None else length_penalty
        )
        self.secondary_locale_bonus = (
            settings.SPELLCHECK_RANK_SECONDARY_LOCALE_BONUS
            if secondary_locale_bonus is None else secondary_locale_bonus
        )
        self.per_locale = (
            settings.SPELLCHECK_SUGGESTIONS_PER_LOCALE if per_locale is None else per_locale
        )
        self.max_suggestions = (
            settings.SPELLCHECK_SUGGESTION_COUNT if max_suggestions is None else max_suggestions
        )

    def gather(
        self,
        word: str,
        dictionaries: Sequence[LocaleDictionary],
        limit: int,
        cap: Optional[int] = None,
    ) -> Tuple[List[str], Set[str]]:
        """
        Collect suggestions from all locales.

        Non-primary locales are queried first, the primary locale last.

        Args:
            word: Word to get suggestions for
            dictionaries: Loaded dictionaries, primary first
            limit: Suggestions requested from each locale
            cap: Maximum combined suggestions (None keeps all)

        Returns:
            Tuple of (deduplicated suggestions, suggestions from non-primary locales)
        """
        if not dictionaries:
            return [], set()

        primary, secondaries = dictionaries[0], dictionaries[1:]
        combined: List[str] = []
        from_secondary: Set[str] = set()

        for dictionary in secondaries:
            for suggestion in dictionary.suggest(word, limit):
                from_secondary.add(suggestion)
                if suggestion not in combined:
                    combined.append(suggestion)

        for suggestion in primary.suggest(word, limit):
            if suggestion not in combined:
                combined.append(suggestion)

        if cap is not None:
            combined = combined[:cap]
        return combined, from_secondary

    def score(self, word: str, candidate: str, from_secondary: bool) -> int:
        score = 0
        if candidate[:1].lower() == word[:1].lower():
            score += self.first_letter_bonus
        score -= abs(len(candidate) - len(word)) * self.length_penalty
        if from_secondary:
            score += self.secondary_locale_bonus
        return score

    def pick_best(self, word: str, candidates: List[str], from_secondary: Set[str]) -> Optional[str]:
        """
        Pick the highest scoring candidate.

        Args:
            word: Word being corrected
            candidates: Candidates in gathered order
            from_secondary: Candidates suggested by a non-primary locale

        Returns:
            Best candidate with the word's capitalization, or None
        """
        if not candidates:
            return None

        # sorted() is stable: equal scores keep the gathered order
        ranked = sorted(
            candidates,
            key=lambda candidate: self.score(word, candidate, candidate in from_secondary),
            reverse=True,
        )
        return match_capitalization(word, ranked[0])

    def rank(self, word: str, dictionaries: Sequence[LocaleDictionary]) -> Tuple[List[str], Optional[str]]:
        """
        Suggestions and best guess for an unrecognized word.

        Args:
            word: Unrecognized word
            dictionaries: Loaded dictionaries, primary first

        Returns:
            Tuple of (suggestions, best suggestion or None)
        """
        candidates, from_secondary = self.gather(
            word, dictionaries, self.per_locale, cap=self.max_suggestions
        )
        return candidates, self.pick_best(word, candidates, from_secondary)
