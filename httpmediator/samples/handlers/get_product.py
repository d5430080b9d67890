from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from httpmediator.core.cancellation import CancellationToken
from httpmediator.core.envelope import HttpResponse, not_found, ok
from httpmediator.core.handler import HttpHandler
from httpmediator.core.request import HttpRequest


class Input(HttpRequest):
    id: int


class Output(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str


class Handler(HttpHandler[Input, Output]):
    async def handle_async(self, request: Input, cancellation: CancellationToken) -> HttpResponse[Output]:
        self._logger.debug("handle_async")

        if request.id == 0:
            return not_found()

        return ok(Output(id=request.id, name=f"Product #{request.id}"))
