from abc import ABC, abstractmethod

from notary.ledger.models import SubmissionRecord, WriteAck


class BaseLedger(ABC):
    """Contract for all ledger record store adapters."""

    @abstractmethod
    async def write(self, submitter: str, item_id: str, digest: str) -> WriteAck:
        """Append a record for (submitter, item_id) and wait for inclusion.

        Raises:
            LedgerAlreadyExistsError: the pair already has a record.
            LedgerUnauthorizedError: the signer refused the write.
            LedgerUnreachableError: the ledger could not be contacted.
            LedgerTimeoutError: inclusion was not confirmed in time.
            LedgerError: any other rejection.
        """

    @abstractmethod
    async def read_one(self, submitter: str, item_id: str) -> SubmissionRecord | None:
        """Return the record for a single pair, or None if none exists.

        Raises:
            LedgerError: if the ledger cannot be queried.
        """

    @abstractmethod
    async def read_range(self, horizon: int) -> list[SubmissionRecord]:
        """Return records appended within the last ``horizon`` units, oldest first.

        Raises:
            LedgerError: if the ledger cannot be queried.
        """

    async def close(self) -> None:
        """Release transport resources. Default: nothing to release."""
