from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

import httpmediator_samples
from httpmediator.core.errors import ConfigInvalid
from httpmediator.core.log import setup_logger
from httpmediator.samples.config import ServerConfig, load_config


def write_json(path: Path, obj: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")


def test_cli_uses_defaults_without_config():
    called = []
    httpmediator_samples.main([], runner=called.append)
    assert called == [ServerConfig()]


def test_cli_flags_override_config_file(tmp_path: Path):
    cfg_path = tmp_path / "server.json"
    write_json(cfg_path, {"host": "0.0.0.0", "port": 9000, "log_level": "WARNING"})

    called = []
    httpmediator_samples.main(
        ["--config", str(cfg_path), "--port", "9100", "--log-level", "debug"],
        runner=called.append,
    )
    assert called == [ServerConfig(host="0.0.0.0", port=9100, log_level="DEBUG")]


def test_load_config_rejects_unknown_keys_and_bad_ports(tmp_path: Path):
    bad_key = tmp_path / "bad_key.json"
    write_json(bad_key, {"hostname": "x"})
    with pytest.raises(ConfigInvalid):
        load_config(bad_key)

    bad_port = tmp_path / "bad_port.json"
    write_json(bad_port, {"port": 0})
    with pytest.raises(ConfigInvalid) as exc:
        load_config(bad_port)
    assert exc.value.code == "CONFIG_INVALID"


def test_load_config_reports_unreadable_file(tmp_path: Path):
    with pytest.raises(ConfigInvalid) as exc:
        load_config(tmp_path / "missing.json")
    assert exc.value.code == "CONFIG_UNREADABLE"

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigInvalid):
        load_config(broken)


def test_setup_logger_is_idempotent():
    name = "httpmediator.tests.setup"
    logger = setup_logger(name, "debug")
    again = setup_logger(name, logging.WARNING)
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_app_factory(tmp_path: Path):
    pytest.importorskip("fastapi")
    from httpmediator.samples.app import create_app

    config = ServerConfig(port=8123)
    app = create_app(config=config)
    assert app.title
    assert app.state.config is config
    paths = {route.path for route in app.routes}
    assert {"/products/{product_id}", "/orders"} <= paths
