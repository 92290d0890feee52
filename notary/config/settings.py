from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    ledger_backend: str = "web3"
    ledger_rpc_url: str = "http://127.0.0.1:7545"
    contract_address: str = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
    ledger_scan_horizon_blocks: int = 10000
    ledger_request_timeout_seconds: int = 30
    ledger_receipt_timeout_seconds: int = 120

    wallet_agent: str = "jsonrpc"
    wallet_rpc_url: str = "http://127.0.0.1:7545"
    wallet_timeout_seconds: int = 10
    wallet_poll_interval_seconds: float = 2.0
    static_wallet_identities: list[str] = []
    static_wallet_network_id: int = 1337

    audit_enabled: bool = True
    audit_api_url: str = "http://localhost:5000"
    audit_timeout_seconds: int = 5

    demo_fallback_enabled: bool = True
    fingerprint_chunk_size_bytes: int = 1024 * 1024

    @field_validator("ledger_scan_horizon_blocks", "fingerprint_chunk_size_bytes")
    @classmethod
    def _must_be_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive integer")
        return value
