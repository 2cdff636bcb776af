"""
API routes for spell-checking, completion and caret-safe rewriting.

Carets and ranges on the wire are UTF-16 code-unit offsets, matching what
browser and Electron text widgets report.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from spellcomplete.schemas.spellcheck import (
    AnalysisResult,
    AutoCorrection,
    AutocompleteSuggestion,
    DictionaryStatusResponse,
    MisspelledWord,
    RewriteResult,
    SpaceRequest,
    TextRequest,
)
from spellcomplete.services.spellcheck import SpellCheckEngine, get_spellcheck_engine
from spellcomplete.utils.logger import get_logger
from spellcomplete.utils.offsets import index_to_utf16, utf16_to_index

logger = get_logger("routes.spellcheck")

router = APIRouter(prefix="/api/v1/spellcheck", tags=["Spell-check"])


def _caret_in(text: str, caret: Optional[int]) -> Optional[int]:
    if caret is None:
        return None
    return utf16_to_index(text, caret)


def _word_out(text: str, word: MisspelledWord) -> MisspelledWord:
    return word.model_copy(update={
        "start_index": index_to_utf16(text, word.start_index),
        "end_index": index_to_utf16(text, word.end_index),
    })


def _autocomplete_out(text: str, autocomplete: AutocompleteSuggestion) -> AutocompleteSuggestion:
    return autocomplete.model_copy(update={
        "start_index": index_to_utf16(text, autocomplete.start_index),
        "end_index": index_to_utf16(text, autocomplete.end_index),
    })


def _rewrite_out(result: RewriteResult) -> RewriteResult:
    return result.model_copy(update={"caret": index_to_utf16(result.text, result.caret)})


@router.get("/status", response_model=DictionaryStatusResponse)
async def get_status(
    engine: SpellCheckEngine = Depends(get_spellcheck_engine),
) -> DictionaryStatusResponse:
    """
    Report dictionary load state.

    Returns:
        DictionaryStatusResponse with state, locales and load error (if any)
    """
    manager = engine.manager
    return DictionaryStatusResponse(
        state=manager.state,
        is_loaded=manager.is_loaded,
        locales=manager.locales,
        error=manager.error,
    )


@router.post("/analyze", response_model=AnalysisResult)
def analyze_text(
    request: TextRequest,
    engine: SpellCheckEngine = Depends(get_spellcheck_engine),
) -> AnalysisResult:
    """
    Analyze text for misspellings and the completion at the caret.

    Called on every text change. Returns empty results while dictionaries
    are not loaded (see is_loaded and error).
    """
    text = request.text
    result = engine.analyze(text, _caret_in(text, request.caret))

    return result.model_copy(update={
        "misspelled_words": [_word_out(text, word) for word in result.misspelled_words],
        "autocomplete": (
            _autocomplete_out(text, result.autocomplete) if result.autocomplete else None
        ),
        "current_word_correction": (
            _word_out(text, result.current_word_correction)
            if result.current_word_correction else None
        ),
    })


@router.post("/corrections", response_model=RewriteResult)
def apply_all_corrections(
    request: TextRequest,
    engine: SpellCheckEngine = Depends(get_spellcheck_engine),
) -> RewriteResult:
    """Apply the best suggestion to every misspelled word."""
    result = engine.apply_all_corrections(request.text, _caret_in(request.text, request.caret))
    return _rewrite_out(result)


@router.post("/autocomplete", response_model=RewriteResult)
def apply_autocomplete(
    request: TextRequest,
    engine: SpellCheckEngine = Depends(get_spellcheck_engine),
) -> RewriteResult:
    """Accept the completion offered at the caret."""
    result = engine.apply_autocomplete(request.text, _caret_in(request.text, request.caret))
    return _rewrite_out(result)


@router.post("/tab", response_model=RewriteResult)
def apply_tab(
    request: TextRequest,
    engine: SpellCheckEngine = Depends(get_spellcheck_engine),
) -> RewriteResult:
    """
    Handle the Tab key: correct all words, then complete at the caret.

    The host must adopt the returned text and caret together.
    """
    result = engine.apply_tab(request.text, _caret_in(request.text, request.caret))
    if result.changed:
        logger.info("Tab rewrite applied", length=len(result.text))
    return _rewrite_out(result)


@router.post("/space", response_model=AutoCorrection)
def auto_correct_on_space(
    request: SpaceRequest,
    engine: SpellCheckEngine = Depends(get_spellcheck_engine),
) -> AutoCorrection:
    """
    Correct the word in front of a space about to be inserted.

    The space is not inserted; corrected=False means the host keeps its text.
    """
    text = request.text
    caret = utf16_to_index(text, request.caret)
    correction = engine.auto_correct_on_space(text, caret)
    if correction is None:
        return AutoCorrection(text=text, caret=index_to_utf16(text, caret), corrected=False)

    return correction.model_copy(update={"caret": index_to_utf16(correction.text, correction.caret)})
