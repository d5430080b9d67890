"""Transport-agnostic outcome of handling one request.

An envelope is either a success (optional model + status) or a failure
(error message + status). Handlers build one with the free functions below
and return it; ``HttpHandler`` turns it into the HTTP response.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Generic, TypeVar

from .errors import ContractViolation

T = TypeVar("T")

NOT_FOUND_MESSAGE = "Status Code: 404; Not Found"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Distinguishes "no model argument" (empty success) from an explicit None.
MISSING: Any = _Missing()


def _as_status(status_code: int | HTTPStatus) -> HTTPStatus:
    try:
        return HTTPStatus(int(status_code))
    except (TypeError, ValueError) as e:
        raise ContractViolation(code="STATUS_INVALID", message=f"unknown HTTP status code: {status_code!r}") from e


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


@dataclass(frozen=True)
class HttpResponse(Generic[T]):
    model: T | None = None
    status_code: HTTPStatus = HTTPStatus.OK
    error_message: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "status_code", _as_status(self.status_code))
        if self.error_message is not None and _is_blank(self.error_message):
            raise ContractViolation(code="ERROR_MESSAGE_BLANK", message="error_message must not be blank")

    @property
    def succeeded(self) -> bool:
        return self.error_message is None


def success(status_code: int | HTTPStatus, model: T = MISSING) -> HttpResponse[T]:
    if model is MISSING:
        return HttpResponse(status_code=status_code)
    if model is None:
        raise ContractViolation(code="MODEL_MISSING", message="model is required when responding with a model")
    return HttpResponse(model=model, status_code=status_code)


def failure(error_message: str, status_code: int | HTTPStatus) -> HttpResponse[Any]:
    if _is_blank(error_message):
        raise ContractViolation(code="ERROR_MESSAGE_BLANK", message="error_message is required for a failed response")
    return HttpResponse(status_code=status_code, error_message=error_message)


def ok(model: T = MISSING) -> HttpResponse[T]:
    return success(HTTPStatus.OK, model)


def created(model: T = MISSING) -> HttpResponse[T]:
    return success(HTTPStatus.CREATED, model)


def no_content(model: T = MISSING) -> HttpResponse[T]:
    return success(HTTPStatus.NO_CONTENT, model)


def not_found() -> HttpResponse[Any]:
    return failure(NOT_FOUND_MESSAGE, HTTPStatus.NOT_FOUND)


def conflict(error_message: str) -> HttpResponse[Any]:
    return failure(error_message, HTTPStatus.CONFLICT)
