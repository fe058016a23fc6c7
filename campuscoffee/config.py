"""
Configuration settings for the CampusCoffee OSM importer
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import os

from dotenv import load_dotenv

from .models import CampusType


@dataclass
class APIConfig:
    """OpenStreetMap API endpoint and request settings"""
    # OSM editing API (v0.6), serves single nodes as XML
    osm_base_url: str = "https://www.openstreetmap.org/api/0.6"

    # Request settings (seconds)
    connect_timeout: float = 10.0
    read_timeout: float = 10.0

    # User agent for API requests
    user_agent: str = "CampusCoffee/1.0"


@dataclass
class ImportConfig:
    """Mapping rules used when converting OSM nodes to POS entries"""
    default_campus: CampusType = CampusType.ALTSTADT

    # Heidelberg postal codes of the campus areas
    campus_by_postal_code: Dict[int, CampusType] = field(default_factory=lambda: {
        69117: CampusType.ALTSTADT,
        69115: CampusType.BERGHEIM,
        69120: CampusType.INF,
    })


@dataclass
class CampusCoffeeConfig:
    """Importer configuration"""
    api: APIConfig = field(default_factory=APIConfig)
    importer: ImportConfig = field(default_factory=ImportConfig)


# Global config instance
config = CampusCoffeeConfig()


def get_config() -> CampusCoffeeConfig:
    """Get global configuration"""
    return config


def load_config(env_file: Optional[str] = None) -> CampusCoffeeConfig:
    """
    Build a configuration from environment variables.

    Values from a .env file are loaded first without overriding variables
    that are already set in the environment.

    Recognized variables:
        CAMPUSCOFFEE_OSM_BASE_URL
        CAMPUSCOFFEE_CONNECT_TIMEOUT
        CAMPUSCOFFEE_READ_TIMEOUT
        CAMPUSCOFFEE_USER_AGENT
    """
    if env_file:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv()

    api = APIConfig()
    base_url = os.getenv("CAMPUSCOFFEE_OSM_BASE_URL")
    if base_url:
        api.osm_base_url = base_url.rstrip("/")
    env_errors = []
    timeout_vars = (
        ("connect_timeout", "CAMPUSCOFFEE_CONNECT_TIMEOUT"),
        ("read_timeout", "CAMPUSCOFFEE_READ_TIMEOUT"),
    )
    for attr, var in timeout_vars:
        raw_value = os.getenv(var)
        if not raw_value:
            continue
        try:
            setattr(api, attr, float(raw_value))
        except ValueError:
            env_errors.append(f"{var} must be a number of seconds, got '{raw_value}'")
    user_agent = os.getenv("CAMPUSCOFFEE_USER_AGENT")
    if user_agent:
        api.user_agent = user_agent

    loaded = CampusCoffeeConfig(api=api)
    validate_config(loaded, env_errors)
    return loaded


def validate_config(config: CampusCoffeeConfig, errors: Optional[List[str]] = None) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.

    errors: problems found earlier (e.g. unparsable environment values),
    reported together with the ones found here
    """
    errors = list(errors or [])

    if not config.api.osm_base_url:
        errors.append("api.osm_base_url is required in config but not set")

    if config.api.connect_timeout is None or config.api.connect_timeout <= 0:
        errors.append(f"api.connect_timeout must be positive, got {config.api.connect_timeout}")

    if config.api.read_timeout is None or config.api.read_timeout <= 0:
        errors.append(f"api.read_timeout must be positive, got {config.api.read_timeout}")

    if not isinstance(config.importer.default_campus, CampusType):
        errors.append("importer.default_campus must be a CampusType")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
