from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from http import HTTPStatus
from typing import Generic, TypeVar

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse, PlainTextResponse, Response

from .cancellation import CancellationToken
from .envelope import HttpResponse
from .errors import ContractViolation
from .request import HttpRequest

TRequest = TypeVar("TRequest", bound=HttpRequest)
TModel = TypeVar("TModel")

# Statuses that must not carry a body on the wire.
_BODYLESS = {HTTPStatus.NO_CONTENT, HTTPStatus.NOT_MODIFIED}


def _allows_body(status_code: HTTPStatus) -> bool:
    return status_code not in _BODYLESS and int(status_code) >= 200


def to_transport_response(envelope: HttpResponse) -> Response:
    status = int(envelope.status_code)
    if not _allows_body(envelope.status_code):
        return Response(status_code=status)
    if not envelope.succeeded:
        return PlainTextResponse(envelope.error_message, status_code=status)
    if envelope.model is not None:
        return JSONResponse(jsonable_encoder(envelope.model), status_code=status)
    return Response(status_code=status)


class HttpHandler(ABC, Generic[TRequest, TModel]):
    """Base class for request handlers that answer over HTTP.

    Subclasses implement ``handle_async`` and return an ``HttpResponse``
    built with the helpers in ``httpmediator.core.envelope``; ``handle``
    turns it into a Starlette response:

    - failure: plain-text error message with the envelope status
    - success with a model: JSON body with the envelope status
    - success without a model: status only, empty body

    204, 304 and 1xx statuses are always sent without a body.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(type(self).__module__)

    async def handle(self, request: TRequest, cancellation: CancellationToken | None = None) -> Response:
        self._logger.debug("handle")

        if request is None:
            raise ContractViolation(code="REQUEST_MISSING", message="request is required")

        self._logger.debug("Beginning request: %r", request)

        response = await self.handle_async(request, cancellation or CancellationToken.none())

        self._logger.debug("Got a response: %r", response)

        if not isinstance(response, HttpResponse):
            raise ContractViolation(
                code="RESPONSE_INVALID",
                message=f"{type(self).__name__}.handle_async must return HttpResponse, got {type(response).__name__}",
            )
        return to_transport_response(response)

    @abstractmethod
    async def handle_async(self, request: TRequest, cancellation: CancellationToken) -> HttpResponse[TModel]: ...
