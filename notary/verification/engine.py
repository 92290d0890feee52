from pathlib import Path

from notary.fingerprint.engine import DEFAULT_CHUNK_SIZE, digests_equal, fingerprint_file
from notary.ledger.base import BaseLedger
from notary.ledger.exceptions import LedgerError
from notary.ledger.models import SubmissionRecord
from notary.logging.logger import Log
from notary.snapshot.cache import RecordSnapshotCache
from notary.verification.models import NOT_VERIFIED, LookupSource, VerificationVerdict


class VerificationEngine:
    """Checks a probe digest against the record for (submitter, item id).

    Reads go to the snapshot cache first and fall through to a single-pair
    ledger query on a miss, so a stale cache never produces a false negative
    while the ledger is up. Fail-closed: when the ledger cannot be asked, the
    verdict is "not verified", and the reason is only visible through the
    log and ``last_lookup``.
    """

    def __init__(
        self,
        cache: RecordSnapshotCache,
        ledger: BaseLedger,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._cache = cache
        self._ledger = ledger
        self._chunk_size = chunk_size
        self.last_lookup: LookupSource | None = None

    async def verify(
        self, submitter: str, item_id: str, probe_digest: str
    ) -> VerificationVerdict:
        record = await self._find(submitter, item_id)
        if record is None:
            return NOT_VERIFIED
        if not digests_equal(record.digest, probe_digest):
            Log.info("Hash mismatch", submitter=submitter, item_id=item_id)
            return NOT_VERIFIED
        Log.info(
            "Submission verified",
            submitter=submitter,
            item_id=item_id,
            source=self.last_lookup.value if self.last_lookup else None,
        )
        return VerificationVerdict(matched=True, record=record)

    async def verify_file(
        self, submitter: str, item_id: str, path: Path
    ) -> VerificationVerdict:
        probe = await fingerprint_file(path, self._chunk_size)
        return await self.verify(submitter, item_id, probe)

    async def _find(self, submitter: str, item_id: str) -> SubmissionRecord | None:
        record = self._cache.lookup(submitter, item_id)
        if record is not None:
            self.last_lookup = LookupSource.CACHE
            return record

        try:
            record = await self._ledger.read_one(submitter, item_id)
        except LedgerError as exc:
            self.last_lookup = LookupSource.UNAVAILABLE
            Log.warning(
                f"Ledger unavailable during verification, reporting not verified: {exc}",
                submitter=submitter,
                item_id=item_id,
                kind=exc.kind.value,
            )
            return None

        self.last_lookup = LookupSource.LEDGER if record else LookupSource.ABSENT
        return record
