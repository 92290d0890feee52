import asyncio
from collections.abc import Mapping
from datetime import datetime, timezone
from types import MappingProxyType

from notary.ledger.base import BaseLedger
from notary.ledger.models import SubmissionRecord, record_key
from notary.logging.logger import Log


class RecordSnapshotCache:
    """Advisory in-memory mirror of recent ledger submission events.

    The snapshot is rebuilt off to the side and swapped in with a single
    assignment, so lookups never observe a half-built refresh. It only holds
    records the ledger returned; it is never the last word on authenticity.
    """

    DEFAULT_HORIZON = 10000

    def __init__(self, ledger: BaseLedger, horizon: int = DEFAULT_HORIZON) -> None:
        self._ledger = ledger
        self._horizon = horizon
        self._records: tuple[SubmissionRecord, ...] = ()
        self._index: Mapping[tuple[str, str], SubmissionRecord] = MappingProxyType({})
        self._refreshed_at: datetime | None = None
        self._refresh_lock = asyncio.Lock()

    @property
    def records(self) -> tuple[SubmissionRecord, ...]:
        return self._records

    @property
    def live_count(self) -> int:
        return len(self._records)

    @property
    def refreshed_at(self) -> datetime | None:
        return self._refreshed_at

    async def refresh(self) -> tuple[SubmissionRecord, ...]:
        """Rescan the ledger horizon and replace the snapshot.

        Raises:
            LedgerError: if the scan fails; the previous snapshot is kept.
        """
        async with self._refresh_lock:
            try:
                fetched = await self._ledger.read_range(self._horizon)
            except Exception as exc:
                Log.warning(
                    f"Snapshot refresh failed, keeping {len(self._records)} cached records: {exc}"
                )
                raise

            index: dict[tuple[str, str], SubmissionRecord] = {}
            for record in fetched:
                # Earliest event for a pair wins; the ledger keeps the first record.
                index.setdefault(record.key, record)

            self._records, self._index = tuple(fetched), MappingProxyType(index)
            self._refreshed_at = datetime.now(timezone.utc)
            Log.info("Snapshot refreshed", records=len(self._records))
            return self._records

    def lookup(self, submitter: str, item_id: str) -> SubmissionRecord | None:
        return self._index.get(record_key(submitter, item_id))
