from notary.verification.engine import VerificationEngine
from notary.verification.models import LookupSource, VerificationVerdict

__all__ = ["LookupSource", "VerificationEngine", "VerificationVerdict"]
