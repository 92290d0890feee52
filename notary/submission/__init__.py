from notary.submission.coordinator import SubmissionCoordinator
from notary.submission.models import SubmissionReceipt

__all__ = ["SubmissionCoordinator", "SubmissionReceipt"]
