from contextlib import suppress
from dataclasses import dataclass
from enum import Enum

from notary.ledger.exceptions import LedgerError
from notary.ledger.models import SubmissionRecord
from notary.snapshot.cache import RecordSnapshotCache
from notary.snapshot.demo import DEMO_RECORDS


class RecordSource(str, Enum):
    LIVE = "live"
    DEMO = "demo"


@dataclass(frozen=True)
class RecordListing:
    source: RecordSource
    records: tuple[SubmissionRecord, ...]


def filter_by_item(
    records: tuple[SubmissionRecord, ...], item_filter: str | None
) -> tuple[SubmissionRecord, ...]:
    """Keep records whose item id contains ``item_filter``, ignoring case."""
    needle = (item_filter or "").strip().lower()
    if not needle:
        return records
    return tuple(r for r in records if needle in r.item_id.lower())


async def list_records(
    cache: RecordSnapshotCache,
    demo_enabled: bool = True,
    item_filter: str | None = None,
) -> RecordListing:
    """List submissions for display.

    Live records come from a fresh refresh, or from the previous snapshot if
    the refresh fails. Demo records are returned, labeled as such, only when
    there are no live records at all. ``item_filter`` narrows whichever
    source was chosen.
    """
    with suppress(LedgerError):
        await cache.refresh()
    if cache.live_count:
        source, records = RecordSource.LIVE, cache.records
    elif demo_enabled:
        source, records = RecordSource.DEMO, DEMO_RECORDS
    else:
        return RecordListing(RecordSource.LIVE, ())
    return RecordListing(source, filter_by_item(records, item_filter))
