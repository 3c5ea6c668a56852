import logging
from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from core.body import decode_json
from core.context import ServerContext
from core.errors import BadRequest
from core.schemas import GreetingRequest

logger = logging.getLogger("MySite.Root")

ROOT_MESSAGE = "This is my website!\n"


def add_any_method_route(router: APIRouter, path: str, endpoint) -> None:
    """
    메서드 제한 없는 라우트 등록 (TRACE, 사용자 정의 메서드 포함).
    APIRoute 는 항상 메서드 목록을 가지므로 Starlette Route(methods=None) 를 사용.
    """
    router.add_route(path, endpoint, methods=None, include_in_schema=False)


def build_greeting_router(context: ServerContext) -> APIRouter:
    router = APIRouter()

    async def get_hello(request: Request):
        req = await decode_json(request, GreetingRequest)

        if req.age <= 0:
            raise BadRequest("Bad Request: Age must be a positive number")

        logger.info(f"{context.server_addr}: got /hello request")
        logger.info(f"Name: {req.name}, Age: {req.age}, Hobby: {req.hobby}")

        return PlainTextResponse(req.greeting())

    # 메서드 제한 없음 (POST 사용 권장)
    add_any_method_route(router, "/hello", get_hello)
    return router


def build_root_router(context: ServerContext) -> APIRouter:
    """
    "/" 및 다른 라우터가 처리하지 않는 모든 경로.
    반드시 마지막에 include 해야 함 (catch-all).
    """
    router = APIRouter()

    async def get_root(request: Request):
        params = request.query_params
        has_first, first = "first" in params, params.get("first", "")
        has_second, second = "second" in params, params.get("second", "")

        try:
            body = await request.body()
        except Exception as e:
            # 본문 읽기 실패는 로그만 남기고 응답에는 영향 없음
            logger.warning(f"could not read body: {e}")
            body = b""

        logger.info(
            f"{context.server_addr}: got / request. "
            f"first({has_first})={first}, second({has_second})={second}, "
            f"body:\n{body.decode('utf-8', errors='replace')}"
        )

        return PlainTextResponse(ROOT_MESSAGE)

    add_any_method_route(router, "/{full_path:path}", get_root)
    return router
