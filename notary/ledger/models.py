from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SubmissionRecord:
    """A (submitter, item id) -> digest entry as persisted by the ledger."""

    submitter: str
    item_id: str
    digest: str
    recorded_at: datetime

    @property
    def key(self) -> tuple[str, str]:
        return record_key(self.submitter, self.item_id)


@dataclass(frozen=True)
class WriteAck:
    """Ledger acknowledgement that a write was included."""

    write_ref: str
    submitter: str
    item_id: str
    digest: str


def record_key(submitter: str, item_id: str) -> tuple[str, str]:
    """Lookup key for a pair; addresses are hex so compare them lowercased."""
    return submitter.lower(), item_id
