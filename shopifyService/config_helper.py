"""
Configuration Helper
Loads shop credentials from the environment or a JSON file of named shops.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError


class ShopifyConfig(BaseModel):
    """Connection settings for a single shop"""
    shop: str = Field(..., description="Shop name or URL (e.g. mystore or mystore.myshopify.com)")
    access_token: str = Field(..., description="Admin API access token")
    api_version: Optional[str] = Field(default=None, description="Admin API version, e.g. 2024-10")
    timeout: Optional[float] = Field(default=None, description="Request timeout in seconds")


class ShopifyConfigValidator:
    """Validation for raw configuration dictionaries"""

    REQUIRED_FIELDS = ["shop", "access_token"]

    @staticmethod
    def validate(config: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
        """
        Check a configuration dictionary.

        :param config: Raw configuration
        :return: (is_valid, error message or None)
        """
        for field in ShopifyConfigValidator.REQUIRED_FIELDS:
            if not config.get(field):
                return False, f"Missing required field: {field}"

        timeout = config.get("timeout")
        if timeout is not None:
            try:
                if float(timeout) <= 0:
                    return False, "timeout must be positive"
            except (TypeError, ValueError):
                return False, f"Invalid timeout: {timeout!r}"

        return True, None


def parse_config(config: Dict[str, Any]) -> ShopifyConfig:
    """
    Validate and build a ShopifyConfig.

    :raises ConfigurationError: If the configuration is incomplete or invalid
    """
    ok, error = ShopifyConfigValidator.validate(config)
    if not ok:
        raise ConfigurationError(error)
    try:
        return ShopifyConfig(**config)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


class ShopifyConfigManager:
    """
    Keeps configurations for several shops under a name each.
    Supports loading from environment variables or a JSON file.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        :param config_file: Optional path to a JSON file of ``{name: config}``
        """
        self.config_file = config_file
        self._configs: Dict[str, ShopifyConfig] = {}

        if config_file and Path(config_file).exists():
            self.load_from_file(config_file)

    def load_from_file(self, file_path: str):
        """Load named configurations from a JSON file"""
        with open(file_path, "r") as f:
            raw = json.load(f)

        self._configs = {name: parse_config(config) for name, config in raw.items()}

    def save_to_file(self, file_path: str):
        """Write all configurations to a JSON file"""
        data = {name: config.model_dump(exclude_none=True) for name, config in self._configs.items()}
        with open(file_path, "w") as f:
            json.dump(data, f, indent=2)

    def set_config(self, name: str, config: Dict[str, Any]) -> ShopifyConfig:
        self._configs[name] = parse_config(config)
        return self._configs[name]

    def get_config(self, name: str) -> Optional[ShopifyConfig]:
        return self._configs.get(name)

    def remove_config(self, name: str):
        self._configs.pop(name, None)

    def list_configured(self) -> List[str]:
        return list(self._configs.keys())

    # ==================== Environment Variable Loader ====================

    @staticmethod
    def get_config_from_env(env_file: Optional[str] = None) -> ShopifyConfig:
        """
        Load a configuration from SHOPIFY_* environment variables,
        after reading a .env file if one is found.
        """
        load_dotenv(env_file)

        config: Dict[str, Any] = {
            "shop": os.getenv("SHOPIFY_SHOP_URL", ""),
            "access_token": os.getenv("SHOPIFY_ADMIN_API_KEY", ""),
            "api_version": os.getenv("SHOPIFY_API_VERSION") or None,
        }
        timeout = os.getenv("SHOPIFY_TIMEOUT")
        if timeout:
            config["timeout"] = timeout

        return parse_config(config)
