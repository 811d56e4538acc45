"""Run generate/sign/verify off the caller's thread.

Each operation runs on a worker thread from an executor owned by that call,
under an optional ``asyncio.wait_for`` deadline. The executor is shut down
without joining, so a deadline bounds how long the caller waits even when the
worker itself cannot be interrupted. A timeout is never a success:
generation and signing raise ``SigningError``, verification returns
``False``. Nothing is published until the worker finishes, so a cancelled or
timed-out generate leaves the session untouched.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, Optional, TypeVar

import structlog

from ..core.exceptions import SigningError
from ..crypto.codec import KeyCodec
from ..crypto.keys import KeyPairGenerator
from ..crypto.verifier import PublicKeyLike, Verifier
from .session import SigningSession

log = structlog.get_logger(__name__)

T = TypeVar("T")


async def _in_worker(func: Callable[..., T], *args: Any, timeout: Optional[float]) -> T:
    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="filesig-task")
    try:
        future = loop.run_in_executor(executor, partial(func, *args))
        if timeout is None:
            return await future
        return await asyncio.wait_for(future, timeout)
    finally:
        executor.shutdown(wait=False)


async def run_generate(session: SigningSession, timeout: Optional[float] = None) -> str:
    try:
        kp = await _in_worker(KeyPairGenerator.generate, timeout=timeout)
    except asyncio.TimeoutError as exc:
        log.warning("task.timeout", op="generate", timeout=timeout)
        raise SigningError(f"Key generation timed out after {timeout}s") from exc
    session.install(kp)
    return KeyCodec.encode(kp.public_key)


async def run_sign(session: SigningSession, payload: bytes, timeout: Optional[float] = None) -> str:
    try:
        return await _in_worker(session.sign, payload, timeout=timeout)
    except asyncio.TimeoutError as exc:
        log.warning("task.timeout", op="sign", timeout=timeout)
        raise SigningError(f"Signing timed out after {timeout}s") from exc


async def run_verify(
    public_key: PublicKeyLike,
    payload: bytes,
    signature: str | bytes,
    timeout: Optional[float] = None,
) -> bool:
    try:
        return await _in_worker(Verifier.verify, public_key, payload, signature, timeout=timeout)
    except asyncio.TimeoutError:
        log.warning("task.timeout", op="verify", timeout=timeout)
        return False


__all__ = ["run_generate", "run_sign", "run_verify"]
