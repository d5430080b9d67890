from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HttpMediatorError(Exception):
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ContractViolation(HttpMediatorError):
    """Raised for caller or handler bugs. Never translated into a response."""


class HandlerNotFound(HttpMediatorError):
    pass


class HandlerAlreadyRegistered(HttpMediatorError):
    pass


class OperationCancelled(HttpMediatorError):
    pass


class ConfigInvalid(HttpMediatorError):
    pass
