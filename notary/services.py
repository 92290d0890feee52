from dataclasses import dataclass

from notary.audit.base import BaseAuditLogger
from notary.audit.factory import AuditLoggerFactory
from notary.config.settings import Settings
from notary.ledger.base import BaseLedger
from notary.ledger.factory import LedgerFactory
from notary.snapshot.cache import RecordSnapshotCache
from notary.submission.coordinator import SubmissionCoordinator
from notary.verification.engine import VerificationEngine
from notary.wallet.base import BaseWalletAgent
from notary.wallet.factory import WalletAgentFactory
from notary.wallet.session import WalletSession


@dataclass
class NotaryServices:
    """Everything a front end needs, wired around one ledger and one session."""

    settings: Settings
    ledger: BaseLedger
    agent: BaseWalletAgent
    session: WalletSession
    audit_logger: BaseAuditLogger
    cache: RecordSnapshotCache
    coordinator: SubmissionCoordinator
    verifier: VerificationEngine

    async def aclose(self) -> None:
        """Flush pending audit notifications, then close transports."""
        await self.coordinator.drain()
        await self.audit_logger.close()
        await self.agent.close()
        await self.ledger.close()


def build_services(
    settings: Settings,
    *,
    ledger: BaseLedger | None = None,
    agent: BaseWalletAgent | None = None,
    audit_logger: BaseAuditLogger | None = None,
) -> NotaryServices:
    """Build the notary services from settings; explicit adapters win."""
    ledger = ledger or LedgerFactory.create(settings)
    agent = agent or WalletAgentFactory.create(settings)
    audit_logger = audit_logger or AuditLoggerFactory.create(settings)
    session = WalletSession(agent)
    cache = RecordSnapshotCache(ledger, horizon=settings.ledger_scan_horizon_blocks)
    chunk_size = settings.fingerprint_chunk_size_bytes
    return NotaryServices(
        settings=settings,
        ledger=ledger,
        agent=agent,
        session=session,
        audit_logger=audit_logger,
        cache=cache,
        coordinator=SubmissionCoordinator(session, ledger, audit_logger, chunk_size),
        verifier=VerificationEngine(cache, ledger, chunk_size),
    )
