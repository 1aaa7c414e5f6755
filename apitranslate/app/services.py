import asyncio
from typing import Any, Callable, TypeVar

from fastapi.concurrency import run_in_threadpool

from . import config
from .errors import TranslationFailure
from .models import Translation
from .schemas import TranslateRequest
from .translator import Translator

T = TypeVar("T")


async def translate_request(translator: Translator, payload: TranslateRequest) -> str:
    try:
        return await asyncio.wait_for(
            translator.translate(payload.text, payload.from_language, payload.to_language),
            timeout=config.REQUEST_TIMEOUT_SECONDS,
        )
    except asyncio.TimeoutError as exc:
        raise TranslationFailure("Translation timed out.") from exc


async def call_store(func: Callable[..., T], *args: Any) -> T:
    """Run a blocking store call on the worker pool.

    The call is always awaited to completion so its session is never used
    after the response. Slow calls are bounded by the engine's timeouts and
    surface from the store as PersistenceFailure.
    """
    return await run_in_threadpool(func, *args)


def build_fields(payload: TranslateRequest, translated_text: str) -> dict[str, str]:
    return {
        "original_text": payload.text,
        "translated_text": translated_text,
        "from_language": payload.from_language,
        "to_language": payload.to_language,
    }


def build_record(payload: TranslateRequest, translated_text: str) -> Translation:
    return Translation(**build_fields(payload, translated_text))
