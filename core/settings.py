from typing import Literal

from dotenv import load_dotenv
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

# Load .env file automatically
load_dotenv()


class Settings(BaseSettings):
    """Gateway adapter settings loaded from environment variables.

    Merchant credentials are not settings; callers pass them to the client
    constructor.
    """

    # Protocol
    NVP_VERSION: str = "204"

    # HTTP transport
    HTTP_TIMEOUT: float = 30.0
    USER_AGENT: str = "nvp-gateway/0.1.0"

    # App settings
    ENVIRONMENT: Literal["development", "test", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # Observability (Optional)
    OTEL_SERVICE_NAME: str = "nvp-gateway"
    METRICS_ENABLED: bool = True

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")
