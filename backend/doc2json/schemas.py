from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

BlockTag = Literal["p", "h", "pre"]


class BlockSchema(BaseModel):
    """Exchange representation of one block."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    kind: BlockTag = Field(..., alias="Kind", description="Тег блока: p, h или pre")
    lines: list[str] = Field(
        ...,
        alias="Lines",
        min_length=1,
        description="Исходные строки блока вместе с переводом строки",
    )


class ConvertRequest(BaseModel):
    text: str = Field(..., description="Текст документации без символов комментария")


class ConvertResponse(BaseModel):
    blocks: list[BlockSchema] = Field(
        default_factory=list,
        description="Блоки документа в исходном порядке",
    )


class HealthResponse(BaseModel):
    status: str = Field(..., description="Текущее состояние API")
    version: str = Field(..., description="Версия сервиса")
    environment: str = Field(..., description="Окружение, в котором запущен сервис")


__all__ = [
    "BlockSchema",
    "BlockTag",
    "ConvertRequest",
    "ConvertResponse",
    "HealthResponse",
]
