"""
Configuration loader for the API client
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.razorpay.com/v1"

ENV_OVERRIDES = {
    "RAZORPAY_KEY_ID": "key_id",
    "RAZORPAY_KEY_SECRET": "key_secret",
    "RAZORPAY_BASE_URL": "base_url",
    "RAZORPAY_TIMEOUT_SECONDS": "timeout_seconds",
}


class ClientConfig(BaseModel):
    """Credentials and HTTP settings for one API client"""

    key_id: str = ""
    key_secret: SecretStr = SecretStr("")
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    user_agent: str = "rzp-binding-python"
    headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def has_credentials(self) -> bool:
        return bool(self.key_id and self.key_secret.get_secret_value())


def load_client_config(config_path: Optional[Path] = None) -> ClientConfig:
    """
    Build a ClientConfig from an optional YAML file and the environment

    Environment variables (including ones from a .env file) override values
    from the YAML file.

    Args:
        config_path: Optional path to a YAML file with ClientConfig fields

    Returns:
        Validated ClientConfig object

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist
        ValidationError: If the merged values don't match the schema
    """
    load_dotenv()

    config_data: Dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name, "").strip()
        if value:
            config_data[field_name] = value

    try:
        config = ClientConfig(**config_data)
        logger.info(f"Loaded client config for base_url={config.base_url}")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise
