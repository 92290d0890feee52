import pytest

from notary.ledger.exceptions import (
    LedgerAlreadyExistsError,
    LedgerUnauthorizedError,
    LedgerUnreachableError,
)
from notary.ledger.memory_adapter import InMemoryLedger
from tests.factories import ALICE, BOB, D1, D2


class TestWrite:
    @pytest.mark.asyncio
    async def test_returns_ack(self, ledger: InMemoryLedger) -> None:
        ack = await ledger.write(ALICE, "ASN001", D1)
        assert ack.submitter == ALICE
        assert ack.item_id == "ASN001"
        assert ack.digest == D1
        assert ack.write_ref.startswith("0x")

    @pytest.mark.asyncio
    async def test_rejects_second_write_for_pair(self, ledger: InMemoryLedger) -> None:
        await ledger.write(ALICE, "ASN001", D1)
        with pytest.raises(LedgerAlreadyExistsError, match="already submitted"):
            await ledger.write(ALICE, "ASN001", D2)
        record = await ledger.read_one(ALICE, "ASN001")
        assert record is not None
        assert record.digest == D1

    @pytest.mark.asyncio
    async def test_pair_uniqueness_ignores_address_case(self, ledger: InMemoryLedger) -> None:
        await ledger.write(ALICE, "ASN001", D1)
        with pytest.raises(LedgerAlreadyExistsError):
            await ledger.write(ALICE.lower(), "ASN001", D2)

    @pytest.mark.asyncio
    async def test_same_item_different_submitters(self, ledger: InMemoryLedger) -> None:
        await ledger.write(ALICE, "ASN001", D1)
        await ledger.write(BOB, "ASN001", D2)
        assert (await ledger.read_one(BOB, "ASN001")).digest == D2  # type: ignore[union-attr]

    @pytest.mark.asyncio
    async def test_unauthorized_sender(self) -> None:
        ledger = InMemoryLedger(authorized={ALICE})
        with pytest.raises(LedgerUnauthorizedError):
            await ledger.write(BOB, "ASN001", D1)

    @pytest.mark.asyncio
    async def test_timestamps_increase(self, ledger: InMemoryLedger) -> None:
        await ledger.write(ALICE, "ASN001", D1)
        await ledger.write(ALICE, "ASN002", D2)
        first, second = await ledger.read_range(10)
        assert first.recorded_at < second.recorded_at

class TestReads:
    @pytest.mark.asyncio
    async def test_read_one_absent(self, ledger: InMemoryLedger) -> None:
        assert await ledger.read_one(ALICE, "UNKNOWN") is None

    @pytest.mark.asyncio
    async def test_read_range_is_bounded_and_ordered(self, ledger: InMemoryLedger) -> None:
        for n in range(5):
            await ledger.write(ALICE, f"ASN00{n}", D1)
        records = await ledger.read_range(3)
        assert [r.item_id for r in records] == ["ASN002", "ASN003", "ASN004"]

    @pytest.mark.asyncio
    async def test_read_range_zero_horizon(self, ledger: InMemoryLedger) -> None:
        await ledger.write(ALICE, "ASN001", D1)
        assert await ledger.read_range(0) == []

class TestUnreachable:
    @pytest.mark.asyncio
    async def test_all_operations_fail(self, ledger: InMemoryLedger) -> None:
        ledger.reachable = False
        with pytest.raises(LedgerUnreachableError):
            await ledger.write(ALICE, "ASN001", D1)
        with pytest.raises(LedgerUnreachableError):
            await ledger.read_one(ALICE, "ASN001")
        with pytest.raises(LedgerUnreachableError):
            await ledger.read_range(10)
