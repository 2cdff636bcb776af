"""
Unit tests for the spell-check engine.
"""
import pytest

from spellcomplete.schemas.spellcheck import AnalysisResult, AutocompleteSuggestion, RewriteResult
from spellcomplete.services import spellcheck as spellcheck_module
from spellcomplete.services.completion import CompletionPredictor
from spellcomplete.services.dictionary import DictionaryManager
from spellcomplete.services.ranker import SuggestionRanker
from spellcomplete.services.spellcheck import (
    SpellCheckEngine,
    get_spellcheck_engine,
    initialize_spellcheck,
    reset_spellcheck_engine,
)


class TestAnalyze:
    """Tests for SpellCheckEngine.analyze()."""

    def test_finds_misspelled_word(self, engine):
        """Test 'quik' is reported with an English q-word as best guess."""
        result = engine.analyze("the quik brown fox")

        assert result.is_loaded is True
        assert result.error is None
        assert len(result.misspelled_words) == 1

        word = result.misspelled_words[0]
        assert word.word == "quik"
        assert (word.start_index, word.end_index) == (4, 8)
        assert word.suggestions == ["quick", "kick", "quack"]
        assert word.best_suggestion == "quick"

    def test_correct_text_has_no_misspellings(self, engine):
        result = engine.analyze("the quick brown fox")

        assert result.misspelled_words == []
        assert result.current_word_correction is None

    def test_capitalized_word_checked_lowercase(self, engine):
        """Test 'Hello' is accepted because 'hello' is in the dictionary."""
        assert engine.analyze("Hello world ").misspelled_words == []

    def test_spanish_words_accepted(self, engine):
        assert engine.analyze("hola mundo, por favor ").misspelled_words == []

    def test_current_word_not_reported_as_misspelled(self, engine):
        """Test the word being typed goes to current_word_correction instead."""
        result = engine.analyze("hello wrold")

        assert result.misspelled_words == []
        assert result.current_word_correction is not None
        assert result.current_word_correction.word == "wrold"
        assert result.current_word_correction.best_suggestion == "world"

    def test_current_word_without_suggestions(self, engine):
        result = engine.analyze("hello zzqx")

        assert result.misspelled_words == []
        assert result.current_word_correction is None

    def test_word_reported_once_caret_moves_away(self, engine):
        result = engine.analyze("hello wrold ", caret=12)

        assert [w.word for w in result.misspelled_words] == ["wrold"]
        assert result.current_word_correction is None

    def test_misspelled_word_without_suggestions_still_reported(self, engine):
        result = engine.analyze("zzqx hello ")

        assert len(result.misspelled_words) == 1
        assert result.misspelled_words[0].suggestions == []
        assert result.misspelled_words[0].best_suggestion is None

    def test_ignored_words_skipped(self, engine):
        result = engine.analyze("the API uses camelCase and lol ")

        reported = {w.word for w in result.misspelled_words}
        assert reported == {"uses", "and"}

    def test_completion_from_table(self, engine):
        result = engine.analyze("hel", caret=3)

        assert result.autocomplete == AutocompleteSuggestion(
            original="hel", completion="hello", remaining_text="lo", start_index=0, end_index=3
        )

    def test_completion_from_dictionary(self, engine):
        """Test an unrecognized word is completed from dictionary suggestions."""
        result = engine.analyze("so wonderfu")

        assert result.autocomplete is not None
        assert result.autocomplete.completion == "wonderful"
        assert result.autocomplete.remaining_text == "l"
        assert (result.autocomplete.start_index, result.autocomplete.end_index) == (3, 11)

    def test_recognized_word_not_completed_from_dictionary(self, engine, english, spanish):
        """Test tier 2 never runs for a word the dictionaries accept."""
        engine.analyze("fox")

        assert "fox" not in english.suggest_calls
        assert "fox" not in spanish.suggest_calls

    def test_next_word_prediction(self, engine):
        result = engine.analyze("Muchas ", caret=7)

        assert result.autocomplete is not None
        assert result.autocomplete.completion == "gracias"
        assert result.autocomplete.original == ""
        assert (result.autocomplete.start_index, result.autocomplete.end_index) == (7, 7)

    def test_prediction_at_end_of_recognized_word(self, engine):
        result = engine.analyze("good")

        assert result.autocomplete is not None
        assert result.autocomplete.completion == " morning"

    def test_no_prediction_after_unrecognized_word(self, engine):
        assert engine.analyze("zzqx ").autocomplete is None

    def test_blank_text(self, engine):
        assert engine.analyze("") == AnalysisResult(is_loaded=True)
        assert engine.analyze("   \n") == AnalysisResult(is_loaded=True)

    def test_caret_defaults_to_end_and_is_clamped(self, engine):
        text = "the quik brown fox"
        assert engine.analyze(text) == engine.analyze(text, len(text))
        assert engine.analyze(text, 99) == engine.analyze(text, len(text))
        assert engine.analyze(text, -5) == engine.analyze(text, 0)

    def test_deterministic(self, engine):
        text = "teh quik hel"
        assert engine.analyze(text, 12) == engine.analyze(text, 12)

    def test_at_most_five_suggestions(self, engine, english, spanish):
        english.suggestions["xyzzy"] = ["x1", "x2", "x3"]
        spanish.suggestions["xyzzy"] = ["y1", "y2", "y3"]

        result = engine.analyze("xyzzy ")

        assert len(result.misspelled_words[0].suggestions) == 5

    def test_zero_completion_suggestions_disables_dictionary_completion(self, manager):
        """Test an explicit 0 is not replaced by the configured default."""
        engine = SpellCheckEngine(
            manager,
            ranker=SuggestionRanker(per_locale=3, max_suggestions=5),
            predictor=CompletionPredictor(),
            min_word_length=1,
            completion_suggestions=0,
        )

        assert engine.analyze("so wonderfu").autocomplete is None

    def test_min_word_length_skips_short_words(self, manager):
        engine = SpellCheckEngine(manager, min_word_length=4, completion_suggestions=5)

        result = engine.analyze("teh quik ")

        assert [w.word for w in result.misspelled_words] == ["quik"]


class TestRewrites:
    """Tests for the rewrite operations."""

    def test_apply_all_corrections(self, engine):
        result = engine.apply_all_corrections("teh quik brown fox", 18)

        assert result == RewriteResult(text="the quick brown fox", caret=19, changed=True)

    def test_apply_all_corrections_leaves_current_word(self, engine):
        result = engine.apply_all_corrections("teh wrold")

        assert result.text == "the wrold"
        assert result.caret == 9

    def test_apply_all_corrections_idempotent(self, engine):
        """Test correcting already-correct text changes nothing."""
        result = engine.apply_all_corrections("the quick brown fox", 5)

        assert result == RewriteResult(text="the quick brown fox", caret=5, changed=False)

    def test_apply_all_corrections_keeps_caret_on_its_word(self, engine):
        text = "teh quik brown fox"
        result = engine.apply_all_corrections(text, 11)

        assert result.text == "the quick brown fox"
        assert result.text[result.caret - 2:result.caret + 3] == "brown"

    def test_apply_autocomplete_in_word(self, engine):
        result = engine.apply_autocomplete("say hel")

        assert result == RewriteResult(text="say hello", caret=9, changed=True)

    def test_apply_autocomplete_insertion(self, engine):
        result = engine.apply_autocomplete("Muchas ", 7)

        assert result == RewriteResult(text="Muchas gracias", caret=14, changed=True)

    def test_apply_autocomplete_nothing_offered(self, engine):
        result = engine.apply_autocomplete("zzqx ", 5)

        assert result == RewriteResult(text="zzqx ", caret=5, changed=False)

    def test_apply_tab_corrects_and_completes(self, engine):
        """Test Tab fixes earlier misspellings, then completes the current word."""
        result = engine.apply_tab("teh quik hel", 12)

        assert result == RewriteResult(text="the quick hello", caret=15, changed=True)

    def test_apply_tab_corrects_current_word_without_completion(self, engine):
        result = engine.apply_tab("hello wrold", 11)

        assert result.text == "hello world"
        assert result.caret == 11

    def test_apply_tab_predicts_after_correction(self, engine):
        """Test the second pass predicts a phrase from the corrected text."""
        result = engine.apply_tab("thnk ", 5)

        assert result.text == "thank you"
        assert result.caret == 9

    def test_apply_tab_caret_in_middle(self, engine):
        text = "teh fox jumps"
        result = engine.apply_tab(text, 7)

        assert result.text.startswith("the fox")
        assert 0 <= result.caret <= len(result.text)

    def test_apply_tab_nothing_to_do(self, engine):
        result = engine.apply_tab("zzqx ", 5)

        assert result == RewriteResult(text="zzqx ", caret=5, changed=False)

    @pytest.mark.parametrize("text,caret", [
        ("", 0),
        ("teh", 0),
        ("teh quik hel", 4),
        ("teh quik hel", 100),
        ("Muchas ", 3),
        ("  hel  ", 5),
    ])
    def test_rewrites_keep_caret_in_bounds(self, engine, text, caret):
        for operation in (engine.apply_all_corrections, engine.apply_autocomplete, engine.apply_tab):
            result = operation(text, caret)
            assert 0 <= result.caret <= len(result.text)


class TestAutoCorrectOnSpace:
    """Tests for SpellCheckEngine.auto_correct_on_space()."""

    def test_corrects_word_before_caret(self, engine):
        result = engine.auto_correct_on_space("I want teh", 10)

        assert result is not None
        assert result.text == "I want the"
        assert result.caret == 10
        assert result.corrected is True
        assert result.original == "teh"
        assert result.replacement == "the"

    def test_corrects_word_in_middle(self, engine):
        result = engine.auto_correct_on_space("quik fox", 4)

        assert result is not None
        assert result.text == "quick fox"
        assert result.caret == 5

    def test_preserves_capitalization(self, engine):
        result = engine.auto_correct_on_space("Teh", 3)

        assert result is not None
        assert result.text == "The"

    def test_correct_word_unchanged(self, engine):
        assert engine.auto_correct_on_space("I want the", 10) is None

    def test_no_suggestion(self, engine):
        assert engine.auto_correct_on_space("I want zzqx", 11) is None

    def test_caret_inside_word(self, engine):
        assert engine.auto_correct_on_space("I want teh", 9) is None

    def test_caret_after_space(self, engine):
        assert engine.auto_correct_on_space("I want teh ", 11) is None

    def test_ignored_word(self, engine):
        assert engine.auto_correct_on_space("I want btw", 10) is None


class TestDegradedMode:
    """Tests for behavior without dictionaries."""

    def test_analyze_returns_empty_result_with_error(self, degraded_engine):
        result = degraded_engine.analyze("the quik brown fox")

        assert result.is_loaded is False
        assert result.misspelled_words == []
        assert result.autocomplete is None
        assert result.error == "Dictionary file not found: /missing/en_US.dic"

    def test_rewrites_return_input(self, degraded_engine):
        text = "teh quik hel"

        assert degraded_engine.apply_tab(text, 12) == RewriteResult(text=text, caret=12)
        assert degraded_engine.apply_all_corrections(text, 12) == RewriteResult(text=text, caret=12)
        assert degraded_engine.apply_autocomplete(text, 12) == RewriteResult(text=text, caret=12)

    def test_space_does_nothing(self, degraded_engine):
        assert degraded_engine.auto_correct_on_space("I want teh", 10) is None

    def test_unloaded_engine_is_degraded(self, english, spanish):
        """Test an engine whose manager never loaded returns empty results."""
        dictionaries = {"en_US": english, "es_ES": spanish}
        engine = SpellCheckEngine(DictionaryManager(["en_US", "es_ES"], dictionaries.__getitem__))

        result = engine.analyze("the quik brown fox")

        assert result.is_loaded is False
        assert result.misspelled_words == []
        assert result.error is None


class TestSingleton:
    """Tests for the module-level engine."""

    @pytest.fixture(autouse=True)
    def reset(self):
        reset_spellcheck_engine()
        yield
        reset_spellcheck_engine()

    def test_get_engine_returns_same_instance(self):
        assert get_spellcheck_engine() is get_spellcheck_engine()

    def test_engine_starts_unloaded(self):
        assert get_spellcheck_engine().is_loaded is False

    def test_initialize_failure_keeps_degraded_engine(self):
        """Test a missing dictionary directory leaves the engine degraded."""
        assert initialize_spellcheck() is False

        engine = get_spellcheck_engine()
        assert engine.is_loaded is False
        assert "not found" in engine.error

    def test_initialize_success(self, manager):
        spellcheck_module._engine = SpellCheckEngine(manager)

        assert initialize_spellcheck() is True
        assert get_spellcheck_engine().is_loaded is True
