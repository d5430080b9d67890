from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from httpmediator.core.cancellation import CancellationToken
from httpmediator.core.envelope import HttpResponse, conflict, created, not_found
from httpmediator.core.handler import HttpHandler
from httpmediator.core.request import HttpRequest

CONFLICT_MESSAGE = "Oops! Conflict occured :("


class Input(HttpRequest):
    product_id: int
    cause_conflict: bool = False
    include_model: bool = True


class Output(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    order_id: int


class Handler(HttpHandler[Input, Output]):
    async def handle_async(self, request: Input, cancellation: CancellationToken) -> HttpResponse[Output]:
        self._logger.debug("handle_async")

        if request.product_id == 0:
            return not_found()

        if request.cause_conflict:
            return conflict(CONFLICT_MESSAGE)

        if not request.include_model:
            return created()

        return created(Output(order_id=request.product_id + 1))
