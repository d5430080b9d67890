from __future__ import annotations

from httpmediator.core.cancellation import CancellationToken
from httpmediator.core.envelope import HttpResponse, no_content, not_found
from httpmediator.core.handler import HttpHandler
from httpmediator.core.request import HttpRequest


class Input(HttpRequest):
    product_id: int


class Handler(HttpHandler[Input, None]):
    async def handle_async(self, request: Input, cancellation: CancellationToken) -> HttpResponse[None]:
        self._logger.debug("handle_async")

        if request.product_id == 0:
            return not_found()

        return no_content()
