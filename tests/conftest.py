import pytest

from notary.audit.null_adapter import NullAuditLogger
from notary.ledger.memory_adapter import InMemoryLedger
from notary.snapshot.cache import RecordSnapshotCache
from notary.submission.coordinator import SubmissionCoordinator
from notary.verification.engine import VerificationEngine
from notary.wallet.session import WalletSession
from notary.wallet.static_agent import StaticWalletAgent
from tests.factories import ALICE, BOB, NETWORK_ID


@pytest.fixture()
def ledger() -> InMemoryLedger:
    return InMemoryLedger()


@pytest.fixture()
def agent() -> StaticWalletAgent:
    return StaticWalletAgent([ALICE, BOB], NETWORK_ID)


@pytest.fixture()
def session(agent: StaticWalletAgent) -> WalletSession:
    return WalletSession(agent)


@pytest.fixture()
def cache(ledger: InMemoryLedger) -> RecordSnapshotCache:
    return RecordSnapshotCache(ledger, horizon=100)


@pytest.fixture()
def coordinator(session: WalletSession, ledger: InMemoryLedger) -> SubmissionCoordinator:
    return SubmissionCoordinator(session, ledger, NullAuditLogger())


@pytest.fixture()
def verifier(cache: RecordSnapshotCache, ledger: InMemoryLedger) -> VerificationEngine:
    return VerificationEngine(cache, ledger)
