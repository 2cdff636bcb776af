"""
Pydantic schemas for engine results and API request/response models.
"""
from spellcomplete.schemas.spellcheck import (
    AnalysisResult,
    AutoCorrection,
    AutocompleteSuggestion,
    DictionaryState,
    MisspelledWord,
    RewriteResult,
    TextEdit,
    WordToken,
)

__all__ = [
    "AnalysisResult",
    "AutoCorrection",
    "AutocompleteSuggestion",
    "DictionaryState",
    "MisspelledWord",
    "RewriteResult",
    "TextEdit",
    "WordToken",
]
