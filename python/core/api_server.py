import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from core.config import Settings, load_settings
from core.context import ServerContext
from core.errors import register_exception_handlers
from core.site_router import build_greeting_router, build_root_router
from core.translate_router import build_translate_router
from core.translator import MyMemoryTranslator, Translator

logger = logging.getLogger("MySite.Server")


def create_app(
    settings: Optional[Settings] = None,
    context: Optional[ServerContext] = None,
    translator: Optional[Translator] = None,
) -> FastAPI:
    """
    FastAPI 앱 생성.
    context / translator 는 테스트에서 주입 가능 (기본값은 settings 기반).
    """
    settings = settings or load_settings()
    context = context or ServerContext.from_bind(settings.host, settings.port)
    translator = translator or MyMemoryTranslator(settings.translation_base_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Serving on {context.server_addr}")
        yield
        logger.info("Shutting down")

    # No docs routes: every unclaimed path belongs to the root handler
    app = FastAPI(title="MySite", lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.state.context = context
    register_exception_handlers(app)

    # Order matters: the root router is a catch-all
    app.include_router(build_greeting_router(context))
    app.include_router(build_translate_router(context, translator))
    app.include_router(build_root_router(context))

    return app
