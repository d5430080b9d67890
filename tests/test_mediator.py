from __future__ import annotations

import asyncio

import pytest

pytest.importorskip("fastapi")

from pydantic import BaseModel

from httpmediator.core.cancellation import CancellationToken
from httpmediator.core.errors import ContractViolation, HandlerAlreadyRegistered, HandlerNotFound
from httpmediator.core.mediator import Mediator
from httpmediator.core.request import HttpRequest


class Ping(HttpRequest):
    n: int = 0


class LoudPing(Ping):
    pass


class Unrelated(HttpRequest):
    pass


class RecordingHandler:
    def __init__(self):
        self.calls = []

    async def handle(self, request, cancellation=None):
        self.calls.append((request, cancellation))
        return "handled"


def test_send_dispatches_to_registered_handler():
    mediator = Mediator()
    handler = RecordingHandler()
    mediator.register(Ping, handler)
    token = CancellationToken()

    result = asyncio.run(mediator.send(Ping(n=1), token))

    assert result == "handled"
    assert handler.calls == [(Ping(n=1), token)]


def test_send_resolves_subclass_through_mro():
    mediator = Mediator()
    handler = RecordingHandler()
    mediator.register(Ping, handler)
    assert mediator.handler_for(LoudPing) is handler


def test_send_without_handler_raises():
    mediator = Mediator()
    mediator.register(Ping, RecordingHandler())
    with pytest.raises(HandlerNotFound):
        asyncio.run(mediator.send(Unrelated()))


def test_register_twice_raises():
    mediator = Mediator()
    mediator.register(Ping, RecordingHandler())
    with pytest.raises(HandlerAlreadyRegistered):
        mediator.register(Ping, RecordingHandler())


def test_register_requires_marker():
    class Plain(BaseModel):
        pass

    mediator = Mediator()
    with pytest.raises(ContractViolation) as exc:
        mediator.register(Plain, RecordingHandler())  # type: ignore[arg-type]
    assert exc.value.code == "REQUEST_NOT_ROUTABLE"


def test_send_rejects_missing_or_unmarked_request():
    mediator = Mediator()
    with pytest.raises(ContractViolation):
        asyncio.run(mediator.send(None))  # type: ignore[arg-type]
    with pytest.raises(ContractViolation):
        asyncio.run(mediator.send({"n": 1}))  # type: ignore[arg-type]
