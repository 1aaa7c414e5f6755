import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from ..errors import NotFound, PersistenceFailure, TranslationFailure
from ..models import Translation
from ..schemas import TranslateRequest, TranslationResponse
from ..services import build_fields, build_record, call_store, translate_request
from ..store import TranslationStore, get_store
from ..translator import Translator, get_translator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["translations"])

SAVE_SUCCESS_MESSAGE = "Translation saved successfully"
# Translation and save failures share one response; the cause is only logged.
SAVE_ERROR_MESSAGE = "Error translating text"
UPDATE_ERROR_MESSAGE = "Error updating translation"

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"description": "Translation not found."}}


def not_found(exc: NotFound) -> Response:
    logger.info("%s", exc.message)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.post("/translate", response_class=PlainTextResponse)
async def translate_text(
    payload: TranslateRequest,
    translator: Translator = Depends(get_translator),
    store: TranslationStore = Depends(get_store),
) -> PlainTextResponse:
    try:
        translated_text = await translate_request(translator, payload)
        await call_store(store.create, build_record(payload, translated_text))
    except (TranslationFailure, PersistenceFailure) as exc:
        logger.error("Error translating text: %s", exc.message)
        return PlainTextResponse(SAVE_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return PlainTextResponse(SAVE_SUCCESS_MESSAGE)


@router.get("/translations/{translation_id}", response_model=TranslationResponse, responses=NOT_FOUND_RESPONSE)
async def get_translation(
    translation_id: int,
    store: TranslationStore = Depends(get_store),
) -> Translation | Response:
    try:
        return await call_store(store.find_by_id, translation_id)
    except NotFound as exc:
        return not_found(exc)


@router.get("/translations", response_model=list[TranslationResponse])
async def list_translations(store: TranslationStore = Depends(get_store)) -> list[Translation]:
    return await call_store(store.find_all)


@router.put("/translations/{translation_id}", response_model=TranslationResponse, responses=NOT_FOUND_RESPONSE)
async def update_translation(
    translation_id: int,
    payload: TranslateRequest,
    translator: Translator = Depends(get_translator),
    store: TranslationStore = Depends(get_store),
) -> Translation | Response:
    try:
        await call_store(store.find_by_id, translation_id)
    except NotFound as exc:
        return not_found(exc)

    # Nothing is written until the new translation is in hand.
    try:
        translated_text = await translate_request(translator, payload)
        return await call_store(store.update, translation_id, build_fields(payload, translated_text))
    except NotFound as exc:
        return not_found(exc)
    except (TranslationFailure, PersistenceFailure) as exc:
        logger.error("Error updating translation %s: %s", translation_id, exc.message)
        return PlainTextResponse(UPDATE_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.delete(
    "/translations/{translation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_translation(
    translation_id: int,
    store: TranslationStore = Depends(get_store),
) -> Response:
    try:
        await call_store(store.find_by_id, translation_id)
        await call_store(store.delete, translation_id)
    except NotFound as exc:
        return not_found(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
