from pydantic import BaseModel
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Load .env file if it exists (before reading os.getenv)
_env_path = Path(__file__).resolve().parent.parent / ".env"
if _env_path.exists():
    with open(_env_path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()
                # Only set if not already in environment (env vars take precedence)
                if key not in os.environ:
                    os.environ[key] = value


class Settings(BaseModel):
    # Advertised to the client during initialization
    server_name: str = os.getenv("TOOLSERVER_NAME", "my-mcp-server")
    server_version: str = os.getenv("TOOLSERVER_VERSION", "1.0.0")

    # fetch_data
    fetch_timeout_s: float = float(os.getenv("TOOLSERVER_FETCH_TIMEOUT", "30"))

    # Logging (always to stderr, stdout carries the protocol)
    log_level: str = os.getenv("TOOLSERVER_LOG_LEVEL", "INFO").upper()

settings = Settings()
