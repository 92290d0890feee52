from collections.abc import Callable
from typing import ClassVar

from notary.config.settings import Settings
from notary.ledger.base import BaseLedger
from notary.ledger.memory_adapter import InMemoryLedger
from notary.ledger.web3_adapter import Web3LedgerAdapter


class LedgerFactory:
    """Creates the ledger adapter named by ``settings.ledger_backend``."""

    BACKENDS: ClassVar[dict[str, Callable[[Settings], BaseLedger]]] = {
        "web3": Web3LedgerAdapter.from_settings,
        "memory": lambda settings: InMemoryLedger(),
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseLedger:
        backend = settings.ledger_backend.lower()
        builder = cls.BACKENDS.get(backend)
        if builder is None:
            raise ValueError(
                f"Unknown ledger backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
            )
        return builder(settings)
