import logging
from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import quote_plus

import httpx
from core.schemas import UpstreamTranslation

logger = logging.getLogger("MySite.Translator")

DEFAULT_BASE_URL = "https://api.mymemory.translated.net"

# ------------------------------------------------------------------------------
# [Errors]
# ------------------------------------------------------------------------------
class TranslationError(Exception):
    """Base class for failures talking to the translation upstream."""


class UpstreamUnavailable(TranslationError):
    """The request could not be sent or no response was received."""


class UpstreamStatusError(TranslationError):
    def __init__(self, status_code: int, status: str):
        super().__init__(f"upstream responded {status}")
        self.status_code = status_code
        self.status = status


class UpstreamParseError(TranslationError):
    """The upstream body is not the expected responseData shape."""

# ------------------------------------------------------------------------------
# [Translator Interface]
# ------------------------------------------------------------------------------
class Translator(ABC):
    """translate(text, source, target) -> 번역문. 실패 시 TranslationError."""

    @abstractmethod
    async def translate(self, text: str, source: str, target: str) -> str:
        ...


def build_translate_url(base_url: str, text: str, source: str, target: str) -> str:
    return f"{base_url.rstrip('/')}/get?q={quote_plus(text)}&langpair={source}|{target}"


class MyMemoryTranslator(Translator):
    """
    MyMemory 공개 API 호출.
    재시도 없음, 타임아웃은 httpx 기본값 사용.
    """
    def __init__(self, base_url: str = DEFAULT_BASE_URL, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip('/')
        # 테스트에서 httpx.MockTransport 주입용
        self.transport = transport

    async def translate(self, text: str, source: str, target: str) -> str:
        api_url = build_translate_url(self.base_url, text, source, target)
        logger.info(f"API URL: {api_url}")

        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                resp = await client.get(api_url)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.error(f"Upstream request failed: {e}")
                raise UpstreamUnavailable(str(e)) from e

        if resp.status_code != 200:
            status = f"{resp.status_code} {resp.reason_phrase}".strip()
            logger.warning(f"Upstream error status: {status}")
            raise UpstreamStatusError(resp.status_code, status)

        try:
            payload = UpstreamTranslation.model_validate(resp.json())
        except ValueError as e:  # JSONDecodeError, ValidationError
            logger.error(f"Upstream body could not be parsed: {str(resp.content)[:100]}")
            raise UpstreamParseError(str(e)) from e

        return payload.response_data.translated_text
