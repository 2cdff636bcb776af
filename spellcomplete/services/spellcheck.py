"""
Spell-check engine and singleton management.

The engine is a pure function of (text, caret) and the loaded dictionaries:
every call recomputes its results and no state is kept between calls.
"""
from typing import List, Optional

from spellcomplete.config import settings
from spellcomplete.schemas.spellcheck import (
    AnalysisResult,
    AutoCorrection,
    AutocompleteSuggestion,
    MisspelledWord,
    RewriteResult,
    TextEdit,
)
from spellcomplete.services.completion import CompletionPredictor
from spellcomplete.services.dictionary import DictionaryManager
from spellcomplete.services.dictionary_base import LocaleDictionary
from spellcomplete.services.ranker import SuggestionRanker
from spellcomplete.services.rewriter import apply_edits, corrections_to_edits
from spellcomplete.services.tokenizer import is_current_word, is_ignored, tokenize, word_ending_at
from spellcomplete.utils.logger import get_logger

logger = get_logger("services.spellcheck")


def _clamp(text: str, caret: Optional[int]) -> int:
    if caret is None:
        return len(text)
    return max(0, min(caret, len(text)))


class SpellCheckEngine:
    """
    Analyzes text for misspellings and completions, and rewrites it.

    Every operation degrades to empty results (analysis) or an unchanged
    buffer (rewrites) while dictionaries are not loaded.
    """

    def __init__(
        self,
        manager: DictionaryManager,
        ranker: Optional[SuggestionRanker] = None,
        predictor: Optional[CompletionPredictor] = None,
        min_word_length: Optional[int] = None,
        completion_suggestions: Optional[int] = None,
    ):
        """
        Args:
            manager: Dictionary lifecycle owner
            ranker: Suggestion ranker (default weights from config)
            predictor: Completion predictor (default static tables)
            min_word_length: Skip words shorter than this (default from config)
            completion_suggestions: Per-locale suggestions scanned by tier 2 (default from config)
        """
        self._manager = manager
        self._ranker = ranker or SuggestionRanker()
        self._predictor = predictor or CompletionPredictor()
        self._min_word_length = (
            settings.SPELLCHECK_MIN_WORD_LENGTH if min_word_length is None else min_word_length
        )
        self._completion_suggestions = (
            settings.SPELLCHECK_COMPLETION_SUGGESTIONS
            if completion_suggestions is None else completion_suggestions
        )

    @property
    def manager(self) -> DictionaryManager:
        return self._manager

    @property
    def is_loaded(self) -> bool:
        return self._manager.is_loaded

    @property
    def error(self) -> Optional[str]:
        return self._manager.error

    def ensure_loaded(self) -> bool:
        return self._manager.ensure_loaded()

    def _is_correct(self, word: str, dictionaries: List[LocaleDictionary]) -> bool:
        lowered = word.lower()
        return any(d.check(word) or d.check(lowered) for d in dictionaries)

    def analyze(self, text: str, caret: Optional[int] = None) -> AnalysisResult:
        """
        Find misspelled words and the single best completion.

        Args:
            text: Buffer to analyze
            caret: Caret offset (defaults to end of text, clamped)

        Returns:
            AnalysisResult; empty when dictionaries are not loaded or text is blank
        """
        dictionaries = self._manager.dictionaries
        if not dictionaries or not text.strip():
            return AnalysisResult(is_loaded=self.is_loaded, error=self.error)

        caret = _clamp(text, caret)
        tokens = tokenize(text)

        misspelled: List[MisspelledWord] = []
        autocomplete: Optional[AutocompleteSuggestion] = None
        current_correction: Optional[MisspelledWord] = None

        for token in tokens:
            word = token.text
            if is_ignored(word, self._min_word_length):
                continue

            is_current = is_current_word(token, text, caret)
            is_correct = self._is_correct(word, dictionaries)

            if is_current:
                autocomplete = self._predictor.complete_from_table(token)
                if autocomplete is None and not is_correct:
                    candidates, _ = self._ranker.gather(word, dictionaries, self._completion_suggestions)
                    autocomplete = self._predictor.complete_from_suggestions(token, candidates)

            if is_correct:
                continue

            suggestions, best = self._ranker.rank(word, dictionaries)
            entry = MisspelledWord(
                word=word,
                start_index=token.start_index,
                end_index=token.end_index,
                suggestions=suggestions,
                best_suggestion=best,
            )
            if not is_current:
                misspelled.append(entry)
            elif best:
                current_correction = entry

        if autocomplete is None:
            autocomplete = self._predictor.predict_phrase(
                text,
                caret,
                tokens,
                lambda word: is_ignored(word, self._min_word_length) or self._is_correct(word, dictionaries),
            )

        logger.debug(
            "Text analyzed",
            length=len(text),
            caret=caret,
            token_count=len(tokens),
            misspelled_count=len(misspelled),
            has_autocomplete=autocomplete is not None,
        )

        return AnalysisResult(
            misspelled_words=misspelled,
            autocomplete=autocomplete,
            current_word_correction=current_correction,
            is_loaded=True,
            error=None,
        )

    def apply_all_corrections(self, text: str, caret: Optional[int] = None) -> RewriteResult:
        """
        Replace every misspelled word (not the current word) with its best suggestion.

        Args:
            text: Buffer to correct
            caret: Caret offset (defaults to end of text)

        Returns:
            RewriteResult with the corrected text and moved caret
        """
        caret = _clamp(text, caret)
        result = self.analyze(text, caret)
        edits = corrections_to_edits(result.misspelled_words)
        if not edits:
            return RewriteResult(text=text, caret=caret, changed=False)

        new_text, new_caret = apply_edits(text, edits, caret)
        return RewriteResult(text=new_text, caret=new_caret, changed=new_text != text)

    def apply_autocomplete(self, text: str, caret: Optional[int] = None) -> RewriteResult:
        """
        Accept the current completion, leaving the caret after it.

        Args:
            text: Buffer
            caret: Caret offset (defaults to end of text)

        Returns:
            RewriteResult; unchanged when there is no completion
        """
        caret = _clamp(text, caret)
        autocomplete = self.analyze(text, caret).autocomplete
        if autocomplete is None:
            return RewriteResult(text=text, caret=caret, changed=False)

        new_text, new_caret = apply_edits(text, [_autocomplete_edit(autocomplete)], caret)
        return RewriteResult(text=new_text, caret=new_caret, changed=True)

    def apply_tab(self, text: str, caret: Optional[int] = None) -> RewriteResult:
        """
        Correct the whole buffer, then accept the completion at the caret.

        Phase one applies every misspelled word's best suggestion, plus the
        current word's correction when no completion is offered for it.
        Phase two analyzes the corrected text at the moved caret and applies
        the completion found there.

        Args:
            text: Buffer
            caret: Caret offset (defaults to end of text)

        Returns:
            RewriteResult with the caret after the last completed word
        """
        caret = _clamp(text, caret)
        if not self.is_loaded or not text.strip():
            return RewriteResult(text=text, caret=caret, changed=False)

        first_pass = self.analyze(text, caret)
        corrections = list(first_pass.misspelled_words)
        if first_pass.autocomplete is None and first_pass.current_word_correction is not None:
            corrections.append(first_pass.current_word_correction)

        corrected, new_caret = apply_edits(text, corrections_to_edits(corrections), caret)

        second_pass = self.analyze(corrected, new_caret)
        if second_pass.autocomplete is not None:
            corrected, new_caret = apply_edits(
                corrected, [_autocomplete_edit(second_pass.autocomplete)], new_caret
            )

        logger.debug(
            "Tab applied",
            corrections=len(corrections),
            completed=second_pass.autocomplete is not None,
            caret=new_caret,
        )
        return RewriteResult(text=corrected, caret=new_caret, changed=corrected != text)

    def auto_correct_on_space(self, text: str, caret: int) -> Optional[AutoCorrection]:
        """
        Correct the word ending at the caret before a space is inserted.

        The space itself is not inserted.

        Args:
            text: Buffer before the space
            caret: Offset where the space will be typed

        Returns:
            AutoCorrection when the word was replaced, otherwise None
        """
        dictionaries = self._manager.dictionaries
        if not dictionaries:
            return None

        caret = _clamp(text, caret)
        token = word_ending_at(text, caret)
        if token is None or is_ignored(token.text, self._min_word_length):
            return None
        if self._is_correct(token.text, dictionaries):
            return None

        _, best = self._ranker.rank(token.text, dictionaries)
        if not best or best == token.text:
            return None

        new_text, new_caret = apply_edits(
            text,
            [TextEdit(start_index=token.start_index, end_index=token.end_index, replacement=best)],
            caret,
        )
        logger.debug("Auto-corrected on space", original=token.text, replacement=best)
        return AutoCorrection(
            text=new_text,
            caret=new_caret,
            corrected=True,
            original=token.text,
            replacement=best,
        )


def _autocomplete_edit(autocomplete: AutocompleteSuggestion) -> TextEdit:
    return TextEdit(
        start_index=autocomplete.start_index,
        end_index=autocomplete.end_index,
        replacement=autocomplete.completion,
    )


# Singleton engine shared by the API
_engine: Optional[SpellCheckEngine] = None


def get_spellcheck_engine() -> SpellCheckEngine:
    """
    Get the singleton spell-check engine.

    The engine exists before dictionaries are loaded and reports
    is_loaded=False until initialize_spellcheck() succeeds.

    Returns:
        SpellCheckEngine instance
    """
    global _engine
    if _engine is None:
        _engine = SpellCheckEngine(DictionaryManager())
    return _engine


def initialize_spellcheck() -> bool:
    """
    Load the dictionaries of the singleton engine.

    Called during app startup. A failure leaves the engine in degraded mode.

    Returns:
        True if initialized successfully, False otherwise
    """
    engine = get_spellcheck_engine()

    logger.info("Initializing spell-check engine...", locales=",".join(engine.manager.locales))
    if engine.ensure_loaded():
        logger.info("Spell-check engine initialized successfully")
        return True

    logger.warning("Failed to initialize spell-check engine", error=engine.error)
    return False


def reset_spellcheck_engine() -> None:
    """Drop the singleton engine (used by tests and reconfiguration)."""
    global _engine
    _engine = None
