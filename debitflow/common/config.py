"""Central environment-driven settings for the Direct Debit client.

Loaded once at import time. Behavior is controlled by environment variables
(see `.env.example`).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Typed view of client configuration from environment variables."""

    service_name: str = "debitflow"
    log_level: str = "INFO"
    api_base_url: str = "https://api.test.paysafe.com"
    api_key_id: str = ""
    api_key_secret: str = ""
    account_number: str = ""
    request_timeout_seconds: float = 5.0
    # Status code carried by validation failures raised before transport.
    validation_error_code: int = 500
    otel_exporter_otlp_endpoint: str = "http://otel-collector:4318/v1/traces"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = ClientSettings()
