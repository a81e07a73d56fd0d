"""Translate component validation errors into HTTP errors."""

from collections.abc import Iterable
from typing import Any, NoReturn, Protocol

from fastapi import HTTPException


class ValidationErrorLike(Protocol):
    code: str
    message: str
    field: str | None


def raise_for_errors(
    errors: Iterable[ValidationErrorLike],
    not_found_code: str | None = None,
) -> NoReturn:
    """404 when the not-found code is present, 400 with every error otherwise."""
    errors = list(errors)
    if not_found_code and any(err.code == not_found_code for err in errors):
        raise HTTPException(status_code=404, detail=errors[0].message)

    detail: list[dict[str, Any]] = [
        {"code": err.code, "message": err.message, "field": err.field} for err in errors
    ]
    raise HTTPException(status_code=400, detail=detail)
