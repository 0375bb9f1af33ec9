"""Schema validation of registry response bodies."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from opsml_cli.core.exceptions import DecodeError

M = TypeVar("M", bound=BaseModel)


def decode_response(model: type[M], body: Any) -> M:
    """Validate a decoded JSON body against ``model``.

    Raises:
        DecodeError: if the body does not match the schema.
    """
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise DecodeError(f"Unexpected {model.__name__} response: {exc}") from exc
