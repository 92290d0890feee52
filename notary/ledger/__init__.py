from notary.ledger.base import BaseLedger
from notary.ledger.factory import LedgerFactory
from notary.ledger.models import SubmissionRecord, WriteAck

__all__ = ["BaseLedger", "LedgerFactory", "SubmissionRecord", "WriteAck"]
