from __future__ import annotations

import logging
from typing import Any, Protocol

from starlette.responses import Response

from .cancellation import CancellationToken
from .errors import ContractViolation, HandlerAlreadyRegistered, HandlerNotFound
from .request import HttpRequest

logger = logging.getLogger(__name__)


class RequestHandler(Protocol):
    async def handle(self, request: Any, cancellation: CancellationToken | None = None) -> Response: ...


class Mediator:
    """Maps each ``HttpRequest`` type to the one handler that answers it.

    Handlers are registered at start-up; ``send`` only reads the table.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[HttpRequest], RequestHandler] = {}

    def register(self, request_type: type[HttpRequest], handler: RequestHandler) -> None:
        if not isinstance(request_type, type) or not issubclass(request_type, HttpRequest):
            raise ContractViolation(
                code="REQUEST_NOT_ROUTABLE",
                message=f"{request_type!r} must subclass HttpRequest to be dispatched",
            )
        if request_type in self._handlers:
            raise HandlerAlreadyRegistered(
                code="HANDLER_ALREADY_REGISTERED",
                message=f"a handler for {request_type.__qualname__} is already registered",
            )
        self._handlers[request_type] = handler
        logger.debug("registered %s -> %s", request_type.__qualname__, type(handler).__qualname__)

    def handler_for(self, request_type: type[HttpRequest]) -> RequestHandler:
        for t in request_type.__mro__:
            handler = self._handlers.get(t)
            if handler is not None:
                return handler
        raise HandlerNotFound(
            code="HANDLER_NOT_FOUND",
            message=f"no handler registered for {request_type.__qualname__}",
        )

    async def send(self, request: HttpRequest, cancellation: CancellationToken | None = None) -> Response:
        if request is None:
            raise ContractViolation(code="REQUEST_MISSING", message="request is required")
        if not isinstance(request, HttpRequest):
            raise ContractViolation(
                code="REQUEST_NOT_ROUTABLE",
                message=f"{type(request).__qualname__} must subclass HttpRequest to be dispatched",
            )
        handler = self.handler_for(type(request))
        return await handler.handle(request, cancellation or CancellationToken.none())
