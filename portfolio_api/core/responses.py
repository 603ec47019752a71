"""Success and error envelopes shared by every endpoint."""

from typing import Any

from pydantic import BaseModel


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_dump(v) for v in value]
    if isinstance(value, dict):
        return {k: _dump(v) for k, v in value.items()}
    return value


def success_response(
    message: str = "Success",
    data: Any = None,
    meta: Any = None,
) -> dict[str, Any]:
    """Build {"success": true, "message", "data"?, "meta"?}; absent parts are omitted."""
    response: dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        response["data"] = _dump(data)
    if meta is not None:
        response["meta"] = _dump(meta)
    return response


def error_response(
    message: str = "An error occurred",
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build {"success": false, "error", "details"?}."""
    response: dict[str, Any] = {"success": False, "error": message}
    if details is not None:
        response["details"] = _dump(details)
    return response
