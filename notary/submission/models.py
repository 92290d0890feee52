from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionReceipt:
    """Result of an included submission."""

    write_ref: str
    submitter: str
    item_id: str
    digest: str
