from .session import SigningSession
from .signer_service import SignerService, SignResult
from .tasks import run_generate, run_sign, run_verify

__all__ = ["SignResult", "SignerService", "SigningSession", "run_generate", "run_sign", "run_verify"]
