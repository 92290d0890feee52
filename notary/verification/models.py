from dataclasses import dataclass
from enum import Enum

from notary.ledger.models import SubmissionRecord


@dataclass(frozen=True)
class VerificationVerdict:
    """Outcome of comparing a probe digest with the recorded one.

    ``record`` is present only on a match. A missing record, a mismatch and
    an unreachable ledger all produce the same negative verdict.
    """

    matched: bool
    record: SubmissionRecord | None = None

    def __post_init__(self) -> None:
        if self.matched != (self.record is not None):
            raise ValueError("a verdict carries a record if and only if it matched")


NOT_VERIFIED = VerificationVerdict(matched=False)


class LookupSource(str, Enum):
    """Where the last verification found (or failed to find) its record."""

    CACHE = "cache"
    LEDGER = "ledger"
    ABSENT = "absent"
    UNAVAILABLE = "unavailable"
