import asyncio
from collections.abc import Awaitable
from datetime import datetime, timezone
from typing import Any, TypeVar

from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import (
    ContractLogicError,
    ProviderConnectionError,
    TimeExhausted,
    Web3RPCError,
)

from notary.config.settings import Settings
from notary.ledger.base import BaseLedger
from notary.ledger.contract_abi import ASSIGNMENT_HASHING_ABI
from notary.ledger.exceptions import (
    LedgerAlreadyExistsError,
    LedgerError,
    LedgerTimeoutError,
    LedgerUnauthorizedError,
    LedgerUnreachableError,
)
from notary.ledger.models import SubmissionRecord, WriteAck
from notary.logging.logger import Log

T = TypeVar("T")

ALREADY_EXISTS_MARKERS = ("already submitted", "already exists", "already recorded")
UNAUTHORIZED_MARKERS = (
    "user denied",
    "user rejected",
    "unknown account",
    "not authorized",
    "sender account not recognized",
)
USER_REJECTED_CODE = 4001


def to_datetime(timestamp: int) -> datetime:
    """Convert a contract timestamp (unix seconds) to an aware UTC datetime."""
    return datetime.fromtimestamp(int(timestamp), tz=timezone.utc)


def classify_rejection(message: str, code: int | None = None) -> LedgerError:
    """Turn a revert / RPC error message into the matching typed ledger error."""
    lowered = message.lower()
    if any(marker in lowered for marker in ALREADY_EXISTS_MARKERS):
        return LedgerAlreadyExistsError(message)
    if code == USER_REJECTED_CODE or any(m in lowered for m in UNAUTHORIZED_MARKERS):
        return LedgerUnauthorizedError(message)
    return LedgerError(message)


class Web3LedgerAdapter(BaseLedger):
    """Ledger adapter for the AssignmentHashing contract over JSON-RPC.

    Writes are sent with ``transact`` from the submitter address, so the
    connected node (or the wallet behind it) does the signing. Every RPC call
    is bounded by ``request_timeout``; receipt polling by ``receipt_timeout``.
    """

    def __init__(
        self,
        w3: Any,
        contract: Any,
        *,
        request_timeout: float,
        receipt_timeout: float,
    ) -> None:
        self._w3 = w3
        self._contract = contract
        self._request_timeout = request_timeout
        self._receipt_timeout = receipt_timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "Web3LedgerAdapter":
        w3 = AsyncWeb3(AsyncHTTPProvider(settings.ledger_rpc_url))
        contract = w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(settings.contract_address),
            abi=ASSIGNMENT_HASHING_ABI,
        )
        return cls(
            w3,
            contract,
            request_timeout=settings.ledger_request_timeout_seconds,
            receipt_timeout=settings.ledger_receipt_timeout_seconds,
        )

    async def write(self, submitter: str, item_id: str, digest: str) -> WriteAck:
        sender = AsyncWeb3.to_checksum_address(submitter)
        call = self._contract.functions.submitAssignment(item_id, digest)
        tx_hash = await self._rpc(call.transact({"from": sender}))
        write_ref = AsyncWeb3.to_hex(tx_hash)
        Log.info("Write sent, waiting for inclusion", write_ref=write_ref)

        try:
            receipt = await self._w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self._receipt_timeout
            )
        except TimeExhausted as exc:
            raise LedgerTimeoutError(
                f"Transaction {write_ref} not confirmed after {self._receipt_timeout}s"
            ) from exc
        except (ProviderConnectionError, OSError) as exc:
            raise LedgerTimeoutError(
                f"Lost connection while waiting for {write_ref}: {exc}"
            ) from exc

        if receipt["status"] != 1:
            raise LedgerError(f"Transaction {write_ref} reverted")
        return WriteAck(
            write_ref=write_ref, submitter=submitter, item_id=item_id, digest=digest
        )

    async def read_one(self, submitter: str, item_id: str) -> SubmissionRecord | None:
        try:
            student = AsyncWeb3.to_checksum_address(submitter)
        except ValueError:
            # not an address; nothing can be recorded under it
            return None
        call = self._contract.functions.getSubmission(student, item_id)
        file_hash, timestamp = await self._rpc(call.call())
        if not file_hash or int(timestamp) == 0:
            return None
        return SubmissionRecord(
            submitter=submitter,
            item_id=item_id,
            digest=file_hash,
            recorded_at=to_datetime(timestamp),
        )

    async def read_range(self, horizon: int) -> list[SubmissionRecord]:
        latest = await self._latest_block()
        from_block = max(0, latest - horizon)
        event = self._contract.events.AssignmentSubmitted
        logs = await self._rpc(event.get_logs(from_block=from_block, to_block=latest))
        Log.debug(
            "Scanned submission events",
            from_block=from_block,
            to_block=latest,
            count=len(logs),
        )
        return [
            SubmissionRecord(
                submitter=log["args"]["student"],
                item_id=log["args"]["assignmentId"],
                digest=log["args"]["fileHash"],
                recorded_at=to_datetime(log["args"]["timestamp"]),
            )
            for log in logs
        ]

    async def close(self) -> None:
        disconnect = getattr(self._w3.provider, "disconnect", None)
        if disconnect is not None:
            await disconnect()

    async def _latest_block(self) -> int:
        return int(await self._rpc(self._w3.eth.block_number))

    async def _rpc(self, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self._request_timeout)
        except asyncio.TimeoutError as exc:
            raise LedgerTimeoutError(
                f"Ledger did not answer within {self._request_timeout}s"
            ) from exc
        except ContractLogicError as exc:
            raise classify_rejection(str(exc)) from exc
        except Web3RPCError as exc:
            code = None
            if isinstance(exc.rpc_response, dict):
                code = (exc.rpc_response.get("error") or {}).get("code")
            raise classify_rejection(str(exc), code) from exc
        except (ProviderConnectionError, OSError) as exc:
            raise LedgerUnreachableError(f"Ledger unreachable: {exc}") from exc
