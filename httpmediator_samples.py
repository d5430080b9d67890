from __future__ import annotations

import argparse
from pathlib import Path

import uvicorn

from httpmediator.core.log import setup_logger
from httpmediator.samples.app import create_app
from httpmediator.samples.config import ServerConfig, load_config


def serve(config: ServerConfig) -> None:
    setup_logger(level=config.log_level)
    app = create_app(config=config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def main(argv: list[str] | None = None, *, runner=serve) -> None:
    p = argparse.ArgumentParser(description="HttpMediator sample API")
    p.add_argument("--config", default=None, type=Path, help="Path to a server config JSON file")
    p.add_argument("--host", default=None)
    p.add_argument("--port", default=None, type=int)
    p.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], type=str.upper)
    args = p.parse_args(argv)

    config = load_config(args.config).with_overrides(host=args.host, port=args.port, log_level=args.log_level)
    runner(config)


if __name__ == "__main__":
    main()
