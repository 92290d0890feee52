import asyncio
from pathlib import Path

from notary.audit.base import BaseAuditLogger
from notary.fingerprint.engine import DEFAULT_CHUNK_SIZE, fingerprint_file, is_digest
from notary.ledger.base import BaseLedger
from notary.ledger.exceptions import LedgerAlreadyExistsError, LedgerError
from notary.logging.logger import Log
from notary.submission.exceptions import DuplicateSubmissionError, InvalidSubmissionError
from notary.submission.models import SubmissionReceipt
from notary.wallet.session import WalletSession


class SubmissionCoordinator:
    """Fingerprint + authenticated ledger write for one item.

    Exactly one write is issued per call and failed writes are never retried
    here: a retry could land a second authorized transaction. The caller
    decides whether to resubmit.
    """

    def __init__(
        self,
        session: WalletSession,
        ledger: BaseLedger,
        audit_logger: BaseAuditLogger,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._session = session
        self._ledger = ledger
        self._audit_logger = audit_logger
        self._chunk_size = chunk_size
        self._pending_audits: set[asyncio.Task[None]] = set()

    async def submit(self, item_id: str, digest: str) -> SubmissionReceipt:
        """Record ``digest`` for (current identity, ``item_id``).

        Raises:
            InvalidSubmissionError: empty item id or malformed digest.
            NotAuthenticatedError: no connected wallet identity.
            DuplicateSubmissionError: the pair already has a record.
            LedgerError: any other ledger failure, including
                LedgerTimeoutError, after which the write may still land.
        """
        if not item_id or not item_id.strip():
            raise InvalidSubmissionError("item_id must not be empty")
        if not is_digest(digest):
            raise InvalidSubmissionError(f"malformed digest: {digest!r}")
        submitter = self._session.require_identity()

        Log.info("Submitting", submitter=submitter, item_id=item_id, digest=digest)
        try:
            ack = await self._ledger.write(submitter, item_id, digest)
        except LedgerAlreadyExistsError as exc:
            Log.error("Duplicate submission rejected", submitter=submitter, item_id=item_id)
            raise DuplicateSubmissionError(str(exc)) from exc
        except LedgerError as exc:
            Log.error(
                f"Submission failed: {exc}",
                submitter=submitter,
                item_id=item_id,
                kind=exc.kind.value,
            )
            raise

        receipt = SubmissionReceipt(
            write_ref=ack.write_ref,
            submitter=submitter,
            item_id=item_id,
            digest=digest,
        )
        Log.info("Submission recorded", item_id=item_id, write_ref=receipt.write_ref)
        self._notify_audit(receipt)
        return receipt

    async def submit_file(self, item_id: str, path: Path) -> SubmissionReceipt:
        digest = await fingerprint_file(path, self._chunk_size)
        return await self.submit(item_id, digest)

    async def drain(self) -> None:
        """Wait for audit notifications still in flight."""
        if self._pending_audits:
            await asyncio.gather(*self._pending_audits)

    def _notify_audit(self, receipt: SubmissionReceipt) -> None:
        task = asyncio.create_task(self._send_audit(receipt))
        self._pending_audits.add(task)
        task.add_done_callback(self._pending_audits.discard)

    async def _send_audit(self, receipt: SubmissionReceipt) -> None:
        try:
            await self._audit_logger.record(
                receipt.submitter, receipt.item_id, receipt.write_ref
            )
        except Exception as exc:
            # Audit mirroring never changes the submission outcome.
            Log.warning(f"Audit log failed: {exc}", write_ref=receipt.write_ref)
