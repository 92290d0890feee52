from notary.audit.base import BaseAuditLogger


class NullAuditLogger(BaseAuditLogger):
    """Discards audit records. Used when ``audit_enabled`` is off."""

    async def record(self, submitter: str, item_id: str, write_ref: str) -> None:
        _ = submitter, item_id, write_ref
