from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from starlette.responses import Response

from httpmediator.core.cancellation import CancellationToken
from httpmediator.core.mediator import Mediator

from .config import ServerConfig
from .handlers import delete_product, get_product, order_product

logger = logging.getLogger(__name__)


def build_mediator() -> Mediator:
    mediator = Mediator()
    mediator.register(get_product.Input, get_product.Handler())
    mediator.register(order_product.Input, order_product.Handler())
    mediator.register(delete_product.Input, delete_product.Handler())
    return mediator


def create_app(*, mediator: Mediator | None = None, config: ServerConfig | None = None) -> FastAPI:
    mediator = mediator or build_mediator()
    config = config or ServerConfig()
    app = FastAPI(title="HttpMediator Samples", version="0.1.0")
    app.state.config = config

    @app.get("/products/{product_id}")
    async def get_product_route(product_id: int, request: Request) -> Response:
        return await mediator.send(get_product.Input(id=product_id), CancellationToken.from_request(request))

    @app.post("/orders")
    async def order_product_route(command: order_product.Input, request: Request) -> Response:
        return await mediator.send(command, CancellationToken.from_request(request))

    @app.delete("/products/{product_id}")
    async def delete_product_route(product_id: int, request: Request) -> Response:
        return await mediator.send(delete_product.Input(product_id=product_id), CancellationToken.from_request(request))

    logger.info("sample app created | host=%s port=%s", config.host, config.port)
    return app
