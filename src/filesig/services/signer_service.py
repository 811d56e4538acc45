# Detached signing and verification of files on disk.
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import structlog

from ..core.exceptions import SigningError
from .session import SigningSession
from .tasks import run_generate, run_sign, run_verify

log = structlog.get_logger(__name__)


@dataclass(slots=True)
class SignResult:
    public_key_path: Path
    signature_path: Path


class SignerService:
    """Synchronous facade over the background tasks, for callers without a loop"""

    def __init__(self, session: SigningSession | None = None, timeout: Optional[float] = None):
        self.session = session or SigningSession()
        self.timeout = timeout

    def sign(self, input_path: Path, public_key_path: Path, sig_path: Path) -> SignResult:
        """Sign ``input_path`` with a freshly generated pair.

        Only public outputs are written: the armored public key and the
        signature. The private key lives in the session and nowhere else.
        """
        try:
            payload = input_path.read_bytes()
        except OSError as exc:
            raise SigningError(f"Cannot read payload file {input_path}") from exc
        armor, sig_b64 = asyncio.run(self._generate_and_sign(payload))
        public_key_path.parent.mkdir(parents=True, exist_ok=True)
        sig_path.parent.mkdir(parents=True, exist_ok=True)
        public_key_path.write_text(armor, encoding="utf-8")
        sig_path.write_text(sig_b64, encoding="utf-8")
        log.info("file.signed", path=str(input_path), signature=str(sig_path))
        return SignResult(public_key_path=public_key_path, signature_path=sig_path)

    async def _generate_and_sign(self, payload: bytes) -> tuple[str, str]:
        armor = await run_generate(self.session, self.timeout)
        return armor, await run_sign(self.session, payload, self.timeout)

    def verify(self, input_path: Path, public_key_path: Path, sig_path: Path) -> bool:
        try:
            payload = input_path.read_bytes()
            armor = public_key_path.read_text(encoding="utf-8")
            sig_b64 = sig_path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError):
            log.info("file.verified", path=str(input_path), valid=False, reason="unreadable input")
            return False
        return asyncio.run(run_verify(armor, payload, sig_b64, self.timeout))
