import json
from typing import Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from core.errors import BadRequest

ModelT = TypeVar("ModelT", bound=BaseModel)

INVALID_JSON = "Bad Request: invalid JSON"

_decoder = json.JSONDecoder()


def first_json_value(raw: bytes):
    """본문의 첫 번째 JSON 값만 읽음. 뒤따르는 데이터는 무시."""
    text = raw.decode("utf-8").lstrip()
    value, _ = _decoder.raw_decode(text)
    return value


async def decode_json(request: Request, model: Type[ModelT]) -> ModelT:
    """요청 본문을 JSON으로 읽어 model로 검증. 실패하면 BadRequest(400)."""
    raw = await request.body()
    try:
        data = first_json_value(raw)
    except ValueError:  # JSONDecodeError, UnicodeDecodeError
        raise BadRequest(INVALID_JSON)

    try:
        return model.model_validate(data)
    except ValidationError:
        raise BadRequest(INVALID_JSON)
