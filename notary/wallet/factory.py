from notary.config.settings import Settings
from notary.wallet.base import BaseWalletAgent
from notary.wallet.jsonrpc_agent import JsonRpcWalletAgent
from notary.wallet.static_agent import StaticWalletAgent


class WalletAgentFactory:
    """Creates the signing agent named by ``settings.wallet_agent``."""

    AGENTS = ("jsonrpc", "static")

    @classmethod
    def create(cls, settings: Settings) -> BaseWalletAgent:
        agent = settings.wallet_agent.lower()
        if agent == "jsonrpc":
            return JsonRpcWalletAgent(
                rpc_url=settings.wallet_rpc_url,
                timeout_seconds=settings.wallet_timeout_seconds,
                poll_interval_seconds=settings.wallet_poll_interval_seconds,
            )
        if agent == "static":
            return StaticWalletAgent(
                settings.static_wallet_identities,
                settings.static_wallet_network_id,
                pre_authorized=bool(settings.static_wallet_identities),
            )
        raise ValueError(
            f"Unknown wallet agent '{agent}'. Choose from: {list(cls.AGENTS)}"
        )
