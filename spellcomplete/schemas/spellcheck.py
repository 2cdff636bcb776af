"""
Pydantic schemas for spell-check and completion functionality.

Engine results use Python string indices; the HTTP layer converts them to
UTF-16 code units before responding.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DictionaryState(str, Enum):
    """Lifecycle of the locale dictionary set."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class WordToken(BaseModel):
    """A maximal run of letters within the buffer."""

    model_config = ConfigDict(frozen=True)

    text: str
    start_index: int = Field(description="Start offset (inclusive)")
    end_index: int = Field(description="End offset (exclusive)")


class MisspelledWord(BaseModel):
    """A word rejected by every locale, with ranked corrections."""

    model_config = ConfigDict(frozen=True)

    word: str = Field(description="Misspelled word as typed")
    start_index: int
    end_index: int
    suggestions: List[str] = Field(
        default_factory=list,
        description="Deduplicated suggestions from all locales (at most 5)"
    )
    best_suggestion: Optional[str] = Field(
        None,
        description="Highest ranked suggestion with the word's capitalization"
    )


class AutocompleteSuggestion(BaseModel):
    """Ghost-text completion for the word being typed or the next word."""

    model_config = ConfigDict(frozen=True)

    original: str = Field(description="Text already typed (empty for next-word predictions)")
    completion: str = Field(description="Full replacement for the range")
    remaining_text: str = Field(description="Completion minus the typed prefix")
    start_index: int
    end_index: int


class TextEdit(BaseModel):
    """Replacement of the half-open range [start_index, end_index)."""

    model_config = ConfigDict(frozen=True)

    start_index: int
    end_index: int
    replacement: str


class AnalysisResult(BaseModel):
    """Everything the host needs to render underlines and ghost text."""

    model_config = ConfigDict(frozen=True)

    misspelled_words: List[MisspelledWord] = Field(default_factory=list)
    autocomplete: Optional[AutocompleteSuggestion] = None
    current_word_correction: Optional[MisspelledWord] = Field(
        None,
        description="Correction for the word still being typed (kept out of misspelled_words)"
    )
    is_loaded: bool = False
    error: Optional[str] = None


class RewriteResult(BaseModel):
    """New buffer contents and caret the host must adopt together."""

    model_config = ConfigDict(frozen=True)

    text: str
    caret: int
    changed: bool = False


class AutoCorrection(BaseModel):
    """Result of correcting the word in front of a space about to be typed."""

    model_config = ConfigDict(frozen=True)

    text: str
    caret: int
    corrected: bool
    original: Optional[str] = None
    replacement: Optional[str] = None


class TextRequest(BaseModel):
    """Buffer plus optional caret (defaults to end of text)."""

    text: str = Field(..., description="Full buffer contents")
    caret: Optional[int] = Field(None, ge=0, description="Caret offset in UTF-16 code units")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"text": "the quik brown fox", "caret": 18}
        }
    )


class SpaceRequest(BaseModel):
    """Buffer and the caret where a space is about to be inserted."""

    text: str = Field(..., description="Full buffer contents")
    caret: int = Field(..., ge=0, description="Caret offset in UTF-16 code units")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"text": "I want teh", "caret": 10}
        }
    )


class DictionaryStatusResponse(BaseModel):
    """Dictionary lifecycle state."""

    state: DictionaryState
    is_loaded: bool
    locales: List[str]
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """Service health."""

    status: str = Field(description="healthy or degraded")
    dictionaries: DictionaryState
    timestamp: datetime
