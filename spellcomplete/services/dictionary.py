"""
Dictionary set lifecycle: load every configured locale once.
"""
import threading
from typing import Callable, List, Optional

from spellcomplete.config import settings
from spellcomplete.schemas.spellcheck import DictionaryState
from spellcomplete.services.dictionary_base import DictionaryLoadError, LocaleDictionary
from spellcomplete.services.dictionary_hunspell import load_dictionary
from spellcomplete.utils.logger import get_logger

logger = get_logger("services.dictionary")

DictionaryFactory = Callable[[str], LocaleDictionary]


class DictionaryManager:
    """
    Owns the locale dictionaries and their load state.

    State moves UNINITIALIZED -> LOADING -> READY or FAILED. A failure is
    terminal until reload() is called explicitly.
    """

    def __init__(
        self,
        locales: Optional[List[str]] = None,
        factory: Optional[DictionaryFactory] = None,
    ):
        """
        Args:
            locales: Locales in preference order, primary first (default from config)
            factory: Callable returning a loaded dictionary for a locale
        """
        self._locales = list(settings.locales if locales is None else locales)
        self._factory = factory or load_dictionary
        self._dictionaries: List[LocaleDictionary] = []
        self._state = DictionaryState.UNINITIALIZED
        self._error: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def locales(self) -> List[str]:
        return list(self._locales)

    @property
    def state(self) -> DictionaryState:
        return self._state

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_loaded(self) -> bool:
        return self._state == DictionaryState.READY

    @property
    def dictionaries(self) -> List[LocaleDictionary]:
        """Loaded dictionaries, primary first (empty unless READY)."""
        if not self.is_loaded:
            return []
        return list(self._dictionaries)

    @property
    def primary(self) -> Optional[LocaleDictionary]:
        dictionaries = self.dictionaries
        return dictionaries[0] if dictionaries else None

    @property
    def secondaries(self) -> List[LocaleDictionary]:
        return self.dictionaries[1:]

    def ensure_loaded(self) -> bool:
        """
        Load all dictionaries unless a load already happened.

        Returns:
            True if dictionaries are ready, False if loading failed
        """
        with self._lock:
            if self._state == DictionaryState.READY:
                return True
            if self._state == DictionaryState.FAILED:
                return False
            return self._load()

    def reload(self) -> bool:
        """Discard the current state and load again."""
        with self._lock:
            self._dictionaries = []
            self._error = None
            self._state = DictionaryState.UNINITIALIZED
            return self._load()

    def _load(self) -> bool:
        self._state = DictionaryState.LOADING
        logger.info("Loading dictionaries", locales=",".join(self._locales))

        try:
            dictionaries = [self._factory(locale) for locale in self._locales]
        except DictionaryLoadError as e:
            self._error = e.message
            self._state = DictionaryState.FAILED
            logger.error("Failed to load dictionaries", locale=e.locale, error=e.message)
            return False
        except Exception as e:
            self._error = f"Unexpected error loading dictionaries: {e}"
            self._state = DictionaryState.FAILED
            logger.error("Failed to load dictionaries", error=str(e), exc_info=True)
            return False

        self._dictionaries = dictionaries
        self._state = DictionaryState.READY
        logger.info("Dictionaries loaded", locales=",".join(self._locales))
        return True
