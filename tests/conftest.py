"""
Pytest configuration and fixtures for spell-check service tests.
"""
import os
from typing import AsyncGenerator, Dict, Iterable, List, Optional

import pytest
from httpx import AsyncClient, ASGITransport

# Never load real dictionaries during tests
os.environ.setdefault("SPELLCHECK_ENABLED", "false")
os.environ.setdefault("SPELLCHECK_DICTIONARY_PATH", "/nonexistent/dictionaries")

from spellcomplete.main import app
from spellcomplete.services.completion import CompletionPredictor
from spellcomplete.services.dictionary import DictionaryManager
from spellcomplete.services.dictionary_base import DictionaryLoadError, LocaleDictionary
from spellcomplete.services.ranker import SuggestionRanker
from spellcomplete.services.spellcheck import SpellCheckEngine, get_spellcheck_engine


EN_WORDS = {
    "i", "want", "the", "quick", "brown", "fox", "hello", "help", "world",
    "thank", "you", "good", "morning", "nice", "is", "a", "this", "that",
    "jumps", "over", "lazy", "dog", "looking", "forward", "wonderful",
}

EN_SUGGESTIONS = {
    "quik": ["quick", "kick", "quack"],
    "teh": ["the", "ten", "tech"],
    "hel": ["helm", "hell"],
    "wrold": ["world", "wold"],
    "helo": ["hello", "help", "halo"],
    "wonderfu": ["wonderful"],
    "goood": ["good", "goods"],
    "thnk": ["thank", "think"],
}

ES_WORDS = {
    "muchas", "gracias", "hola", "por", "favor", "buenos", "días", "el",
    "la", "que", "quiero", "mundo", "y", "de", "canción", "niño",
}

ES_SUGGESTIONS = {
    "teh": ["eh"],
    "grasias": ["gracias"],
    "cancion": ["canción"],
    "nino": ["niño"],
}


class FakeDictionary(LocaleDictionary):
    """In-memory dictionary with fixed words and suggestions."""

    def __init__(
        self,
        locale: str,
        words: Iterable[str],
        suggestions: Optional[Dict[str, List[str]]] = None,
    ):
        self.locale = locale
        self.words = set(words)
        self.suggestions = dict(suggestions or {})
        self.suggest_calls: List[str] = []

    def load(self) -> None:
        pass

    def is_loaded(self) -> bool:
        return True

    def get_locale(self) -> str:
        return self.locale

    def check(self, word: str) -> bool:
        return word in self.words

    def suggest(self, word: str, limit: int) -> List[str]:
        self.suggest_calls.append(word)
        return self.suggestions.get(word.lower(), [])[:limit]


@pytest.fixture
def english() -> FakeDictionary:
    """English dictionary fake (primary locale)."""
    return FakeDictionary("en_US", EN_WORDS, EN_SUGGESTIONS)


@pytest.fixture
def spanish() -> FakeDictionary:
    """Spanish dictionary fake (secondary locale)."""
    return FakeDictionary("es_ES", ES_WORDS, ES_SUGGESTIONS)


@pytest.fixture
def manager(english: FakeDictionary, spanish: FakeDictionary) -> DictionaryManager:
    """Dictionary manager already loaded with both fakes."""
    dictionaries = {"en_US": english, "es_ES": spanish}
    manager = DictionaryManager(locales=["en_US", "es_ES"], factory=dictionaries.__getitem__)
    manager.ensure_loaded()
    return manager


@pytest.fixture
def failed_manager() -> DictionaryManager:
    """Dictionary manager whose load failed."""
    def factory(locale: str) -> LocaleDictionary:
        raise DictionaryLoadError(locale, f"Dictionary file not found: /missing/{locale}.dic")

    manager = DictionaryManager(locales=["en_US", "es_ES"], factory=factory)
    manager.ensure_loaded()
    return manager


def build_engine(manager: DictionaryManager) -> SpellCheckEngine:
    """Engine with explicit default weights, independent of the environment."""
    return SpellCheckEngine(
        manager,
        ranker=SuggestionRanker(
            first_letter_bonus=10,
            length_penalty=2,
            secondary_locale_bonus=2,
            per_locale=3,
            max_suggestions=5,
        ),
        predictor=CompletionPredictor(),
        min_word_length=1,
        completion_suggestions=5,
    )


@pytest.fixture
def engine(manager: DictionaryManager) -> SpellCheckEngine:
    """Engine backed by the loaded fakes."""
    return build_engine(manager)


@pytest.fixture
def degraded_engine(failed_manager: DictionaryManager) -> SpellCheckEngine:
    """Engine running without dictionaries."""
    return build_engine(failed_manager)


@pytest.fixture
async def client(engine: SpellCheckEngine) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an async test client for the FastAPI application.

    Overrides the engine dependency with the fake-backed engine. The app
    lifespan does not run, so no dictionaries are loaded from disk.
    """
    app.dependency_overrides[get_spellcheck_engine] = lambda: engine

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def degraded_client(degraded_engine: SpellCheckEngine) -> AsyncGenerator[AsyncClient, None]:
    """Async test client whose engine has no dictionaries."""
    app.dependency_overrides[get_spellcheck_engine] = lambda: degraded_engine

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
