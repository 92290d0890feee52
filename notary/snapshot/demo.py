"""Static sample records shown when the ledger has nothing live to list."""

from datetime import datetime, timezone

from notary.ledger.models import SubmissionRecord

DEMO_RECORDS: tuple[SubmissionRecord, ...] = (
    SubmissionRecord(
        submitter="0x742d35Cc6634C0532925a3b844Bc9e7595f8aB21",
        item_id="ASN001",
        digest="0x7d865e959b2466918c9863afca942d0fb89d7c9ac0c99bafc3749504ded97730",
        recorded_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
    ),
    SubmissionRecord(
        submitter="0x8ba1f109551bD432803012645Ac136ddd64DBA72",
        item_id="ASN001",
        digest="0x3e23e8160039594a33894f6564e1b1348bbd7a0088d42c4acb73eeaed59c009d",
        recorded_at=datetime(2024, 1, 15, 11, 45, tzinfo=timezone.utc),
    ),
    SubmissionRecord(
        submitter="0xdD2FD4581271e230360230F9337D5c0430Bf44C0",
        item_id="ASN002",
        digest="0x2c26b46b68ffc68ff99b453c1d30413413422d706483bfa0f98a5e886266e7ae",
        recorded_at=datetime(2024, 1, 16, 9, 15, tzinfo=timezone.utc),
    ),
)
