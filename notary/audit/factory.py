from notary.audit.base import BaseAuditLogger
from notary.audit.http_adapter import HttpAuditLogger
from notary.audit.null_adapter import NullAuditLogger
from notary.config.settings import Settings


class AuditLoggerFactory:
    """Creates the configured audit logger adapter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseAuditLogger:
        if not settings.audit_enabled or not settings.audit_api_url.strip():
            return NullAuditLogger()
        return HttpAuditLogger(
            base_url=settings.audit_api_url,
            timeout_seconds=settings.audit_timeout_seconds,
        )
