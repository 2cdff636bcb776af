"""
Abstract base class for locale dictionaries.
"""
from abc import ABC, abstractmethod
from typing import List


class DictionaryLoadError(Exception):
    """
    Raised when a locale's dictionary resources cannot be loaded.

    Attributes:
        locale: Locale being loaded (e.g. 'en_US')
        message: Human-readable reason, surfaced to the host as-is
    """

    def __init__(self, locale: str, message: str):
        super().__init__(message)
        self.locale = locale
        self.message = message


class LocaleDictionary(ABC):
    """
    Abstract base class for one language's spelling dictionary.

    Implementations are immutable once loaded: check and suggest share no
    mutable state and are safe to call from any thread.
    """

    @abstractmethod
    def load(self) -> None:
        """
        Load the dictionary resources.

        Raises:
            DictionaryLoadError: If a resource is missing or unparsable
        """
        pass

    @abstractmethod
    def is_loaded(self) -> bool:
        """Check if the dictionary is loaded and ready."""
        pass

    @abstractmethod
    def get_locale(self) -> str:
        """Get the locale this dictionary handles (e.g., 'en_US')."""
        pass

    @abstractmethod
    def check(self, word: str) -> bool:
        """
        Check whether a word is spelled correctly.

        Case handling follows the dictionary format: a capitalized form of a
        lower-case entry may pass, a lower-cased proper noun does not.
        Callers also try the lower-cased form themselves.

        Args:
            word: Word to check

        Returns:
            True if the word is in the dictionary
        """
        pass

    @abstractmethod
    def suggest(self, word: str, limit: int) -> List[str]:
        """
        Suggest corrections for a word.

        Args:
            word: Misspelled word
            limit: Maximum number of suggestions

        Returns:
            Candidates in the dictionary's own preference order, best first
        """
        pass
