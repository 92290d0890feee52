from abc import ABC, abstractmethod


class BaseAuditLogger(ABC):
    """Contract for side-store audit mirrors.

    Audit records are observational only. Callers ignore failures, so
    implementations may raise freely.
    """

    @abstractmethod
    async def record(self, submitter: str, item_id: str, write_ref: str) -> None:
        """Mirror one successful submission."""

    async def close(self) -> None:
        """Release transport resources. Default: nothing to release."""
