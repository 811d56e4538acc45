from __future__ import annotations

import asyncio
import time

import pytest

from filesig.core.exceptions import SigningError
from filesig.crypto.keys import KeyPair, KeyPairGenerator
from filesig.crypto.verifier import Verifier
from filesig.services import tasks
from filesig.services.session import SigningSession


def test_background_generate_sign_verify() -> None:
    async def scenario() -> bool:
        session = SigningSession()
        armor = await tasks.run_generate(session)
        sig = await tasks.run_sign(session, b"hello world")
        ok = await tasks.run_verify(armor, b"hello world", sig)
        bad = await tasks.run_verify(armor, b"hello world!", sig)
        return ok and not bad

    assert asyncio.run(scenario())


def test_generate_timeout_raises_and_leaves_session(monkeypatch, keypair: KeyPair) -> None:
    def slow_generate() -> KeyPair:
        time.sleep(2.0)
        return keypair

    monkeypatch.setattr(KeyPairGenerator, "generate", staticmethod(slow_generate))
    session = SigningSession()
    started = time.monotonic()
    with pytest.raises(SigningError):
        asyncio.run(tasks.run_generate(session, timeout=0.05))
    assert time.monotonic() - started < 1.0
    assert not session.has_keypair


def test_sign_timeout_raises(monkeypatch, keypair: KeyPair) -> None:
    session = SigningSession()
    session.install(keypair)

    def slow_sign(payload: bytes) -> str:
        time.sleep(0.5)
        return "never"

    monkeypatch.setattr(session, "sign", slow_sign)
    with pytest.raises(SigningError):
        asyncio.run(tasks.run_sign(session, b"data", timeout=0.05))


def test_verify_timeout_is_false(monkeypatch, keypair: KeyPair) -> None:
    def slow_verify(*_args) -> bool:
        time.sleep(2.0)
        return True

    monkeypatch.setattr(Verifier, "verify", staticmethod(slow_verify))
    started = time.monotonic()
    assert asyncio.run(tasks.run_verify(keypair.public_key, b"data", "AAAA", timeout=0.05)) is False
    assert time.monotonic() - started < 1.0


def test_sign_without_pair_propagates_signing_error() -> None:
    with pytest.raises(SigningError):
        asyncio.run(tasks.run_sign(SigningSession(), b"data"))
