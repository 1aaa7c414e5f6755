import logging
from abc import ABC, abstractmethod

import httpx

from . import config
from .errors import TranslationFailure

logger = logging.getLogger(__name__)

API_VERSION = "3.0"


class Translator(ABC):
    @abstractmethod
    async def translate(self, text: str, from_language: str, to_language: str) -> str:
        """Translate ``text`` between two language codes.

        Raises TranslationFailure carrying the provider's message on any error.
        """


class HttpTranslator(Translator):
    """Client for a Microsoft Translator v3 compatible REST endpoint.

    One POST per call, no retries. Language codes are forwarded unchecked.
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        region: str = "",
        timeout_seconds: float = 10.0,
    ) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.api_key = api_key
        self.region = region
        self.timeout_seconds = timeout_seconds

    def _headers(self) -> dict[str, str]:
        headers = {"Ocp-Apim-Subscription-Key": self.api_key}
        if self.region:
            headers["Ocp-Apim-Subscription-Region"] = self.region
        return headers

    async def translate(self, text: str, from_language: str, to_language: str) -> str:
        params = {"api-version": API_VERSION, "from": from_language, "to": to_language}
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(
                    f"{self.endpoint}/translate",
                    params=params,
                    headers=self._headers(),
                    json=[{"Text": text}],
                )
        except httpx.TimeoutException as exc:
            logger.warning("Translation provider timed out: %s", exc)
            raise TranslationFailure("Translation provider timed out.") from exc
        except httpx.RequestError as exc:
            logger.warning("Failed to reach translation provider: %s", exc)
            raise TranslationFailure(f"Failed to reach translation provider: {exc}") from exc

        if response.status_code >= 400:
            message = _provider_error_message(response)
            logger.warning("Translation provider returned HTTP %s: %s", response.status_code, message)
            raise TranslationFailure(message)

        try:
            return response.json()[0]["translations"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            logger.warning("Unexpected translation provider payload: %s", response.text)
            raise TranslationFailure("Translation provider returned an unexpected response.") from exc


def _provider_error_message(response: httpx.Response) -> str:
    try:
        message = response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        message = None
    return message or f"Provider returned HTTP {response.status_code}."


def get_translator() -> Translator:
    return HttpTranslator(
        endpoint=config.TRANSLATOR_ENDPOINT,
        api_key=config.TRANSLATOR_API_KEY,
        region=config.TRANSLATOR_REGION,
        timeout_seconds=config.TRANSLATOR_TIMEOUT_SECONDS,
    )
