from notary.wallet.base import BaseWalletAgent
from notary.wallet.factory import WalletAgentFactory
from notary.wallet.models import SessionStatus, WalletSessionState
from notary.wallet.session import WalletSession

__all__ = [
    "BaseWalletAgent",
    "SessionStatus",
    "WalletAgentFactory",
    "WalletSession",
    "WalletSessionState",
]
