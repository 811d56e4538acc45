from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import structlog

from filesig.config import LOG_LEVEL_ENV, AppConfig, LoggingConfig, dump_default_config, load_config
from filesig.core.exceptions import ConfigError
from filesig.crypto.signer import Signer
from filesig.crypto.verifier import Verifier
from filesig.logging import configure_logging, install_library_default


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.setattr("filesig.config.runtime_config_dir", lambda: tmp_path / "user-config")


def test_defaults_when_no_file() -> None:
    config = load_config()
    assert config == AppConfig()
    assert config.logging.normalized_level() == "INFO"
    assert config.tasks.timeout_seconds is None
    assert config.output.public_key_name == "public.pem"
    assert config.output.signature_name == "signature.txt"


def test_dump_then_load(tmp_path: Path) -> None:
    target = tmp_path / "conf" / "config.yaml"
    dump_default_config(target)
    assert load_config(target) == AppConfig()


def test_cwd_config_is_found(tmp_path: Path) -> None:
    target = tmp_path / ".filesig" / "config.yaml"
    target.parent.mkdir()
    target.write_text("logging:\n  level: debug\ntasks:\n  timeout_seconds: 2.5\n", encoding="utf-8")
    config = load_config()
    assert config.logging.normalized_level() == "DEBUG"
    assert config.tasks.timeout_seconds == 2.5


@pytest.mark.parametrize(
    "content",
    [
        "logging:\n  level: loud\n",
        "tasks:\n  timeout_seconds: 0\n",
        "tasks: [unclosed\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    target = tmp_path / "bad.yaml"
    target.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(target)


def test_missing_explicit_path_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yaml")


def test_env_overrides_level(monkeypatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
    assert load_config().logging.normalized_level() == "WARNING"
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    with pytest.raises(ConfigError):
        load_config()


@pytest.fixture
def _restore_logging():
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
    install_library_default()


@pytest.mark.usefixtures("_restore_logging")
def test_configure_logging_emits_json(capsys) -> None:
    configure_logging(LoggingConfig(level="info"))
    structlog.get_logger("filesig.test").info("payload.signed", size=11)
    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["msg"] == "payload.signed"
    assert record["level"] == "info"
    assert record["size"] == 11
    assert record["logger"] == "filesig.test"
    assert record["app"] == "filesig"
    assert record["profile"] == "RSA-PSS"
    assert "version" in record and "ts" in record


@pytest.mark.usefixtures("_restore_logging")
def test_configure_logging_filters_below_level(capsys) -> None:
    configure_logging(LoggingConfig(level="warning"))
    log = structlog.get_logger("filesig.level")
    log.info("keypair.generated")
    log.warning("task.timeout", op="sign")
    lines = capsys.readouterr().err.strip().splitlines()
    assert [json.loads(line)["msg"] for line in lines] == ["task.timeout"]


@pytest.mark.usefixtures("_restore_logging")
def test_library_use_prints_nothing(capsys, keypair) -> None:
    structlog.reset_defaults()
    install_library_default()
    sig = Signer.sign(keypair.private_key, b"hello world")
    assert Verifier.verify(keypair.public_key, b"hello world", sig)
    assert not Verifier.verify(keypair.public_key, b"hello world!", sig)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
