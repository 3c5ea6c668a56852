from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator

# -------------------------------------------------------------------------
# [Wire Base]
# -------------------------------------------------------------------------

class WireModel(BaseModel):
    """
    클라이언트/업스트림 JSON 공통 디코딩 규칙.
    - 키는 대소문자 구분 없이 매칭 (정확히 일치하는 키가 우선)
    - 알 수 없는 키는 무시
    - JSON null 본문은 빈 객체로 취급
    - null 값 필드는 없는 것으로 취급 (기본값 유지)
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        known: Dict[str, str] = {}
        for name, field in cls.model_fields.items():
            wire = field.alias or name
            known[wire.lower()] = wire
            known.setdefault(name.lower(), name)

        folded: Dict[str, Any] = {}
        for key, value in data.items():
            target = known.get(str(key).lower())
            if target is None or value is None:
                continue
            if target in folded and key != target:
                continue
            folded[target] = value
        return folded

# -------------------------------------------------------------------------
# [Inbound Schemas]
# -------------------------------------------------------------------------

class GreetingRequest(WireModel):
    """/hello 요청 본문 (Name / Age / Hobby)"""
    name: StrictStr = Field(default="", alias="Name")
    age: StrictInt = Field(default=0, alias="Age")
    hobby: StrictStr = Field(default="", alias="Hobby")

    def greeting(self) -> str:
        return f"Hello, {self.name}! You are {self.age} years old and enjoy {self.hobby}.\n"


class TranslationRequest(WireModel):
    """/translate 요청 본문 (text / source / target)"""
    text: StrictStr = ""
    source: StrictStr = ""
    target: StrictStr = ""

    def is_complete(self) -> bool:
        return bool(self.text and self.source and self.target)

# -------------------------------------------------------------------------
# [Outbound / Upstream Schemas]
# -------------------------------------------------------------------------

class TranslationResponse(BaseModel):
    """Python -> Client: 번역 결과"""
    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(alias="translatedText")


class UpstreamResponseData(WireModel):
    translated_text: StrictStr = Field(alias="translatedText")


class UpstreamTranslation(WireModel):
    """MyMemory 응답 구조: {"responseData": {"translatedText": ...}}"""
    response_data: UpstreamResponseData = Field(alias="responseData")
