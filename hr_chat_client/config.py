import os
from functools import lru_cache
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() == "true"


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


class Settings(BaseModel):
    # Read at construction time so a patched environment is picked up
    api_base_url: str = Field(
        default_factory=lambda: os.getenv("HR_CHAT_API_URL", "http://localhost:8000")
    )
    default_tool_type: str = Field(
        default_factory=lambda: os.getenv("HR_CHAT_DEFAULT_TOOL_TYPE", "cv_analysis")
    )
    request_timeout: Optional[float] = Field(
        default_factory=lambda: _env_float("HR_CHAT_REQUEST_TIMEOUT")
    )
    # Query values are sent literally unless this is switched on
    encode_query_params: bool = Field(
        default_factory=lambda: _env_flag("HR_CHAT_ENCODE_QUERY_PARAMS")
    )
    default_headers: Dict[str, str] = Field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
