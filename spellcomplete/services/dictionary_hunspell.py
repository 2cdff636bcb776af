"""
Hunspell-format locale dictionary backed by spylls.

spylls reads the .aff/.dic pair and implements Hunspell's own lookup
(affixes, compounding, capitalization rules) and suggestion algorithms.
"""
import time
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Tuple

from spylls.hunspell import Dictionary

from spellcomplete.config import settings
from spellcomplete.services.dictionary_base import DictionaryLoadError, LocaleDictionary
from spellcomplete.utils.logger import get_logger


logger = get_logger("services.dictionary_hunspell")


class HunspellDictionary(LocaleDictionary):
    """
    Locale dictionary read from '<dictionary_path>/<locale>.aff' and '.dic'.

    Suggestions are memoized per (word, limit), since every keystroke
    re-analyzes the whole buffer.
    """

    def __init__(
        self,
        locale: str,
        dictionary_path: str,
        suggestion_cache_size: Optional[int] = None,
    ):
        """
        Initialize a Hunspell dictionary.

        Args:
            locale: Locale code (e.g. 'en_US'), also the file name stem
            dictionary_path: Directory holding the .aff and .dic files
            suggestion_cache_size: Memoized suggestion lookups (default from config, 0 disables)
        """
        self._locale = locale
        self._base_path = Path(dictionary_path) / locale

        cache_size = (
            settings.SPELLCHECK_SUGGESTION_CACHE_SIZE
            if suggestion_cache_size is None else suggestion_cache_size
        )
        self._cached_suggest = lru_cache(maxsize=cache_size)(self._suggest_uncached)

        self._dictionary: Optional[Dictionary] = None
        self._loaded = False

    @property
    def aff_path(self) -> Path:
        return Path(f"{self._base_path}.aff")

    @property
    def dic_path(self) -> Path:
        return Path(f"{self._base_path}.dic")

    def load(self) -> None:
        """
        Read the affix file and word list.

        Raises:
            DictionaryLoadError: If either resource is missing, unreadable or empty
        """
        if self._loaded:
            return

        for path in (self.aff_path, self.dic_path):
            if not path.is_file():
                raise DictionaryLoadError(self._locale, f"Dictionary file not found: {path}")

        start_time = time.time()
        try:
            dictionary = Dictionary.from_files(str(self._base_path))
        except Exception as e:
            logger.error(
                "Failed to parse Hunspell dictionary",
                locale=self._locale,
                error=str(e),
                exc_info=True,
            )
            raise DictionaryLoadError(
                self._locale, f"Failed to parse dictionary for {self._locale}: {e}"
            ) from e

        if not dictionary.dic.words:
            raise DictionaryLoadError(
                self._locale, f"No words loaded from word list: {self.dic_path}"
            )

        self._dictionary = dictionary
        self._loaded = True

        logger.info(
            "Dictionary loaded",
            locale=self._locale,
            stem_count=len(dictionary.dic.words),
            load_time_seconds=round(time.time() - start_time, 2),
        )

    def check(self, word: str) -> bool:
        """
        Check a word with Hunspell case rules.

        An initial capital or all-caps form of a lower-case entry is
        accepted; a lower-cased proper noun is not.
        """
        if not self._loaded or not word:
            return False
        return self._dictionary.lookup(word)

    def suggest(self, word: str, limit: int) -> List[str]:
        """
        Hunspell suggestions for a word.

        Args:
            word: Misspelled word
            limit: Maximum number of suggestions

        Returns:
            Suggestions in Hunspell's order, best first, never the input itself
        """
        if not self._loaded or limit <= 0 or not word:
            return []
        return list(self._cached_suggest(word, limit))

    def _suggest_uncached(self, word: str, limit: int) -> Tuple[str, ...]:
        suggestions: List[str] = []
        # suggest() is a lazy generator; stop once enough candidates are in
        for candidate in self._dictionary.suggest(word):
            if candidate == word or candidate in suggestions:
                continue
            suggestions.append(candidate)
            if len(suggestions) >= limit:
                break
        return tuple(suggestions)

    def is_loaded(self) -> bool:
        """Check if dictionary is loaded."""
        return self._loaded

    def get_locale(self) -> str:
        """Get locale code."""
        return self._locale


def load_dictionary(locale: str, dictionary_path: Optional[str] = None) -> HunspellDictionary:
    """
    Create and load the dictionary for a locale.

    Args:
        locale: Locale code (e.g. 'es_ES')
        dictionary_path: Directory with Hunspell files (default from config)

    Returns:
        Loaded HunspellDictionary

    Raises:
        DictionaryLoadError: If the dictionary cannot be loaded
    """
    dictionary = HunspellDictionary(
        locale=locale,
        dictionary_path=(
            settings.SPELLCHECK_DICTIONARY_PATH if dictionary_path is None else dictionary_path
        ),
    )
    dictionary.load()
    return dictionary
