"""In-process ledger adapter.

Mirrors the on-chain contract semantics (append-only, one record per pair,
monotonic timestamps) without any network. Used for local development and as
the backing store in tests.
"""

import hashlib
from datetime import datetime, timedelta, timezone

from notary.ledger.base import BaseLedger
from notary.ledger.exceptions import (
    LedgerAlreadyExistsError,
    LedgerUnauthorizedError,
    LedgerUnreachableError,
)
from notary.ledger.models import SubmissionRecord, WriteAck, record_key


class InMemoryLedger(BaseLedger):
    """Append-only ledger kept in a Python list."""

    GENESIS = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __init__(self, authorized: set[str] | None = None) -> None:
        self._log: list[SubmissionRecord] = []
        self._index: dict[tuple[str, str], SubmissionRecord] = {}
        self._authorized = {a.lower() for a in authorized} if authorized else None
        self.reachable = True

    async def write(self, submitter: str, item_id: str, digest: str) -> WriteAck:
        self._ensure_reachable()
        if self._authorized is not None and submitter.lower() not in self._authorized:
            raise LedgerUnauthorizedError(f"sender {submitter} is not authorized")
        key = record_key(submitter, item_id)
        if key in self._index:
            raise LedgerAlreadyExistsError(
                f"Assignment already submitted: {item_id}"
            )
        record = SubmissionRecord(
            submitter=submitter,
            item_id=item_id,
            digest=digest,
            recorded_at=self.GENESIS + timedelta(seconds=len(self._log)),
        )
        self._log.append(record)
        self._index[key] = record
        return WriteAck(
            write_ref=self._write_ref(record, len(self._log)),
            submitter=submitter,
            item_id=item_id,
            digest=digest,
        )

    async def read_one(self, submitter: str, item_id: str) -> SubmissionRecord | None:
        self._ensure_reachable()
        return self._index.get(record_key(submitter, item_id))

    async def read_range(self, horizon: int) -> list[SubmissionRecord]:
        self._ensure_reachable()
        return list(self._log[-horizon:]) if horizon > 0 else []

    def _ensure_reachable(self) -> None:
        if not self.reachable:
            raise LedgerUnreachableError("in-memory ledger is marked unreachable")

    @staticmethod
    def _write_ref(record: SubmissionRecord, sequence: int) -> str:
        payload = f"{sequence}:{record.submitter}:{record.item_id}:{record.digest}"
        return "0x" + hashlib.sha256(payload.encode("utf-8")).hexdigest()
