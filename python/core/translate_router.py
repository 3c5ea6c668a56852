import logging
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from core.body import decode_json
from core.context import ServerContext
from core.errors import BadRequest, InternalServerError
from core.schemas import TranslationRequest, TranslationResponse
from core.site_router import add_any_method_route
from core.translator import (
    TranslationError,
    Translator,
    UpstreamParseError,
    UpstreamStatusError,
    UpstreamUnavailable,
)

logger = logging.getLogger("MySite.Router")


def build_translate_router(context: ServerContext, translator: Translator) -> APIRouter:
    router = APIRouter()

    async def get_translate(request: Request):
        req = await decode_json(request, TranslationRequest)

        if not req.is_complete():
            raise BadRequest("Bad Request: missing required fields")

        logger.info(f"{context.server_addr}: got /translate request [{req.source} -> {req.target}]")

        try:
            translated = await translator.translate(req.text, req.source, req.target)
        except UpstreamUnavailable:
            raise InternalServerError("Internal Server Error: failed to make request")
        except UpstreamStatusError as e:
            raise InternalServerError(f"External API error: {e.status}")
        except UpstreamParseError:
            raise InternalServerError("Internal Server Error: failed to parse response")
        except TranslationError as e:
            logger.error(f"Translation failed: {e}")
            raise InternalServerError("Internal Server Error: failed to make request")

        response = TranslationResponse(translated_text=translated)
        return JSONResponse(content=response.model_dump(by_alias=True))

    add_any_method_route(router, "/translate", get_translate)
    return router
