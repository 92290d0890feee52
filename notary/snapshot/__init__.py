from notary.snapshot.cache import RecordSnapshotCache
from notary.snapshot.listing import (
    RecordListing,
    RecordSource,
    filter_by_item,
    list_records,
)

__all__ = [
    "RecordListing",
    "RecordSnapshotCache",
    "RecordSource",
    "filter_by_item",
    "list_records",
]
