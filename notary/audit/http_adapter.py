import httpx

from notary.audit.base import BaseAuditLogger


class HttpAuditLogger(BaseAuditLogger):
    """Posts submissions to the audit API's ``/log-submission`` endpoint."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = f"{base_url.rstrip('/')}/log-submission"
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def record(self, submitter: str, item_id: str, write_ref: str) -> None:
        response = await self._client.post(
            self._url,
            json={"student": submitter, "assignmentId": item_id, "txHash": write_ref},
        )
        response.raise_for_status()

    async def close(self) -> None:
        await self._client.aclose()
