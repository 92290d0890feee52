import asyncio
import itertools
from collections.abc import AsyncIterator
from typing import Any

import httpx

from notary.wallet.base import BaseWalletAgent
from notary.wallet.exceptions import AgentMissingError, UserRejectedError, WalletError
from notary.wallet.models import AgentEvent, IdentitiesChanged, NetworkChanged

USER_REJECTED_CODE = 4001
METHOD_NOT_FOUND_CODE = -32601


def parse_network_id(raw: str | int) -> int:
    """Chain ids come back as hex strings (``"0x539"``); accept ints too."""
    if isinstance(raw, int):
        return raw
    return int(raw, 16) if raw.lower().startswith("0x") else int(raw)


class JsonRpcWalletAgent(BaseWalletAgent):
    """Signing agent reached over Ethereum-style JSON-RPC on HTTP.

    Works against nodes that manage their own accounts (Ganache, Hardhat,
    Anvil) and wallet bridges that expose ``eth_requestAccounts``.
    """

    def __init__(
        self,
        *,
        rpc_url: str,
        timeout_seconds: float,
        poll_interval_seconds: float,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._rpc_url = rpc_url
        self._poll_interval = poll_interval_seconds
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)
        self._ids = itertools.count(1)

    async def request_identities(self) -> list[str]:
        try:
            accounts = await self._call("eth_requestAccounts")
        except _RpcMethodNotFound:
            accounts = await self._call("eth_accounts")
        return list(accounts)

    async def authorized_identities(self) -> list[str]:
        return list(await self._call("eth_accounts"))

    async def current_network(self) -> int:
        return parse_network_id(await self._call("eth_chainId"))

    async def events(self) -> AsyncIterator[AgentEvent]:
        """Poll the agent and emit an event whenever accounts or chain change."""
        identities = await self.authorized_identities()
        network_id = await self.current_network()
        while True:
            await asyncio.sleep(self._poll_interval)
            latest_identities = await self.authorized_identities()
            latest_network = await self.current_network()
            if latest_identities != identities:
                identities = latest_identities
                yield IdentitiesChanged(tuple(identities))
            if latest_network != network_id:
                network_id = latest_network
                yield NetworkChanged(network_id)

    async def close(self) -> None:
        await self._client.aclose()

    async def _call(self, method: str, params: list[Any] | None = None) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params or [],
        }
        try:
            response = await self._client.post(self._rpc_url, json=payload)
            response.raise_for_status()
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AgentMissingError(
                f"Signing agent not reachable at {self._rpc_url}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise WalletError(f"Signing agent HTTP error: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise WalletError(f"{method} returned a non-JSON response") from exc
        if not isinstance(body, dict):
            raise WalletError(f"{method} returned a malformed response")

        error = body.get("error")
        if error:
            code = error.get("code")
            message = error.get("message", "")
            if code == USER_REJECTED_CODE:
                raise UserRejectedError(message or "User rejected the request")
            if code == METHOD_NOT_FOUND_CODE:
                raise _RpcMethodNotFound(message)
            raise WalletError(f"{method} failed ({code}): {message}")
        return body.get("result")


class _RpcMethodNotFound(WalletError):
    pass
