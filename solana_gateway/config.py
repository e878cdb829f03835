"""Configuration module for the Solana gateway."""

# Standard library imports
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, List, Optional

# Third-party library imports
from dotenv import load_dotenv

# Internal imports
from solana_gateway.constants import LAMPORTS_PER_SOL
from solana_gateway.utils.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()


def get_env_var(key: str, default: Any = None, required: bool = False,
                validator: Optional[Callable[[str], Any]] = None) -> Any:
    """Get and validate environment variable.

    Args:
        key: Environment variable name
        default: Default value if not present
        required: If True, raises ConfigurationError when not found
        validator: Optional validation function

    Returns:
        The environment variable value or default

    Raises:
        ConfigurationError: If required and not found, or fails validation
    """
    value = os.environ.get(key)

    if value is None:
        if required:
            raise ConfigurationError(
                f"Required environment variable '{key}' not found",
                details={"setting": key}
            )
        return default

    if validator is not None:
        try:
            return validator(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for environment variable '{key}': {str(e)}",
                details={"setting": key, "value": value}
            )

    return value


def bool_validator(value: str) -> bool:
    """Validate and convert string to boolean.

    Args:
        value: String value to convert

    Returns:
        Boolean value
    """
    return value.lower() in ("true", "1", "yes", "y", "on")


def int_validator(value: str) -> int:
    """Validate and convert string to integer.

    Args:
        value: String value to convert

    Returns:
        Integer value

    Raises:
        ValueError: If not a valid integer
    """
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid integer")


def float_validator(value: str) -> float:
    """Validate and convert string to a positive float."""
    try:
        result = float(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid number")
    if result <= 0:
        raise ValueError(f"'{value}' must be positive")
    return result


def url_validator(value: str) -> str:
    """Validate URL format.

    Args:
        value: URL to validate

    Returns:
        The validated URL

    Raises:
        ValueError: If not a valid URL format
    """
    url_pattern = re.compile(
        r'^(https?):\/\/'  # http:// or https://
        r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+(?:[A-Z]{2,6}\.?|[A-Z0-9-]{2,}\.?)|'  # domain
        r'localhost|'  # localhost
        r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'  # or IPv4
        r'(?::\d+)?'  # optional port
        r'(?:/?|[/?]\S+)$', re.IGNORECASE)

    if not url_pattern.match(value):
        raise ValueError(f"'{value}' is not a valid URL")
    return value


def commitment_validator(value: str) -> str:
    """Validate Solana commitment level.

    Args:
        value: Commitment level to validate

    Returns:
        The validated commitment level

    Raises:
        ValueError: If not a valid commitment level
    """
    valid_commitments = ("processed", "confirmed", "finalized")
    if value.lower() not in valid_commitments:
        raise ValueError(f"Commitment must be one of: {', '.join(valid_commitments)}")
    return value.lower()


def log_level_validator(value: str) -> str:
    """Validate log level.

    Args:
        value: Log level to validate

    Returns:
        The validated log level

    Raises:
        ValueError: If not a valid log level
    """
    valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    upper_value = value.upper()
    if upper_value not in valid_levels:
        raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
    return upper_value


def environment_validator(value: str) -> str:
    """Validate environment name.

    Args:
        value: Environment name to validate

    Returns:
        The validated environment name

    Raises:
        ValueError: If not a valid environment name
    """
    valid_environments = ("development", "testing", "staging", "production")
    if value.lower() not in valid_environments:
        raise ValueError(f"Environment must be one of: {', '.join(valid_environments)}")
    return value.lower()


def prefix_validator(value: str) -> str:
    """Normalize a route prefix to ``/segment`` form, or empty for the root."""
    stripped = value.strip().strip("/")
    return f"/{stripped}" if stripped else ""


def list_validator(value: str) -> List[str]:
    """Split a comma separated list, dropping blank entries."""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class SolanaConfig:
    """Configuration for the Solana RPC connection."""

    rpc_url: str = "https://api.devnet.solana.com"
    commitment: str = "confirmed"
    timeout: float = 10.0  # seconds
    airdrop_lamports: int = LAMPORTS_PER_SOL

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.timeout <= 0:
            raise ConfigurationError(
                "Request timeout must be positive",
                details={"setting": "SOLANA_TIMEOUT", "value": self.timeout}
            )
        if self.airdrop_lamports <= 0:
            raise ConfigurationError(
                "Airdrop amount must be positive",
                details={"setting": "AIRDROP_LAMPORTS", "value": self.airdrop_lamports}
            )


@lru_cache()
def get_solana_config() -> SolanaConfig:
    """Get Solana configuration from environment variables.

    Uses cached values for efficiency.

    Returns:
        SolanaConfig instance

    Raises:
        ConfigurationError: If environment variables fail validation
    """
    return SolanaConfig(
        rpc_url=get_env_var("SOLANA_RPC_URL", "https://api.devnet.solana.com",
                            validator=url_validator),
        commitment=get_env_var("SOLANA_COMMITMENT", "confirmed",
                               validator=commitment_validator),
        timeout=get_env_var("SOLANA_TIMEOUT", 10.0, validator=float_validator),
        airdrop_lamports=get_env_var("AIRDROP_LAMPORTS", LAMPORTS_PER_SOL,
                                     validator=int_validator)
    )


@dataclass
class ServerConfig:
    """Configuration for the server."""

    host: str = "0.0.0.0"
    port: int = 8001
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def bind_address(self) -> str:
        """Get the bind address for the server.

        Returns:
            Formatted bind address
        """
        return f"{self.host}:{self.port}"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.environment not in ("development", "testing", "staging", "production"):
            raise ConfigurationError(f"Invalid environment: {self.environment}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Invalid log_level: {self.log_level}")

        if not 0 < self.port < 65536:
            raise ConfigurationError(f"Invalid port: {self.port}")


@lru_cache()
def get_server_config() -> ServerConfig:
    """Get server configuration from environment variables.

    Returns:
        ServerConfig instance

    Raises:
        ConfigurationError: If environment variables fail validation
    """
    return ServerConfig(
        host=get_env_var("HOST", "0.0.0.0"),
        port=get_env_var("PORT", 8001, validator=int_validator),
        debug=get_env_var("DEBUG", False, validator=bool_validator),
        environment=get_env_var("ENVIRONMENT", "development", validator=environment_validator),
        log_level=get_env_var("LOG_LEVEL", "INFO", validator=log_level_validator)
    )


@dataclass
class APIConfig:
    """Configuration for the HTTP surface."""

    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:5173"])
    api_prefix: str = ""
    static_dir: Optional[str] = None


@lru_cache()
def get_api_config() -> APIConfig:
    """Get API configuration from environment variables."""
    return APIConfig(
        cors_origins=get_env_var("CORS_ORIGINS", ["http://localhost:5173"], validator=list_validator),
        api_prefix=get_env_var("API_PREFIX", "", validator=prefix_validator),
        static_dir=get_env_var("STATIC_DIR") or None
    )


@dataclass
class AppConfig:
    """Comprehensive application configuration."""

    solana: SolanaConfig = field(default_factory=get_solana_config)
    server: ServerConfig = field(default_factory=get_server_config)
    api: APIConfig = field(default_factory=get_api_config)


def get_app_config() -> AppConfig:
    """Get the comprehensive application configuration."""
    return AppConfig()
