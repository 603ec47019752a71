"""Shared schema base classes, pagination metadata and reusable field validators."""

import math
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel

_HTTP_URL = TypeAdapter(HttpUrl)

# Text that is trimmed before length checks run.
Trimmed = Annotated[str, StringConstraints(strip_whitespace=True)]


class CamelModel(BaseModel):
    """Base for API schemas: snake_case attributes, camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Base for request bodies; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class PageMeta(BaseModel):
    """Pagination metadata returned alongside list endpoints."""

    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    pages: int = Field(..., ge=0)
    limit: int = Field(..., ge=1)

    @classmethod
    def build(cls, total: int, page: int, limit: int) -> "PageMeta":
        return cls(total=total, page=page, pages=math.ceil(total / limit), limit=limit)


def validate_http_url(value: str | None) -> str | None:
    """Accept blank/None as None; otherwise require an absolute http(s) URL. The input is kept as sent."""
    if value is None or not value.strip():
        return None
    try:
        _HTTP_URL.validate_python(value.strip())
    except ValidationError as e:
        raise ValueError("must be a valid http(s) URL") from e
    return value.strip()


def reject_nulls(data: Any, fields: tuple[str, ...]) -> Any:
    """For partial updates: a non-nullable field may be omitted but not sent as null."""
    if isinstance(data, dict):
        for name in fields:
            for key in (name, to_camel(name)):
                if key in data and data[key] is None:
                    raise ValueError(f"{to_camel(name)} cannot be null")
    return data
