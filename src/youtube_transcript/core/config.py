"""
Configuration for the transcript client.
All defaults can be overridden via environment variables or a local .env file.
"""

import os
from pathlib import Path
from typing import List, Optional, Tuple
from dataclasses import dataclass, field
from dotenv import load_dotenv

from ..utils.logging import DEFAULT_DATE_FORMAT, DEFAULT_LOG_FORMAT, get_logger, set_log_format, set_log_level

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_4) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/85.0.4183.83 Safari/537.36,gzip(gfe)'
)

CATALOG_SOURCES = ('auto', 'innertube', 'watch_page')

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def _parse_list_env(env_var: str, default: List[str]) -> List[str]:
    """Parse a comma-separated environment variable into a list."""
    value = os.getenv(env_var)
    if value:
        return [item.strip() for item in value.split(',') if item.strip()]
    return default


def _parse_bool_env(env_var: str, default: str = 'false') -> bool:
    return os.getenv(env_var, default).lower() == 'true'

# =============================================================================
# CORE APPLICATION SETTINGS
# =============================================================================

@dataclass
class AppConfig:
    """Core application configuration."""
    version: str = field(default_factory=lambda: os.getenv('APP_VERSION', '1.0.2'))
    debug: bool = field(default_factory=lambda: _parse_bool_env('DEBUG'))


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))
    format: str = field(default_factory=lambda: os.getenv('LOG_FORMAT', DEFAULT_LOG_FORMAT))
    date_format: str = field(default_factory=lambda: os.getenv('LOG_DATE_FORMAT', DEFAULT_DATE_FORMAT))

# =============================================================================
# NETWORK CONFIGURATION
# =============================================================================

@dataclass
class NetworkConfig:
    """Network, timeout and proxy configuration."""
    http_timeout_total: int = field(default_factory=lambda: int(os.getenv('HTTP_TIMEOUT_TOTAL', '30')))
    http_timeout_connect: int = field(default_factory=lambda: int(os.getenv('HTTP_TIMEOUT_CONNECT', '10')))
    user_agent: str = field(default_factory=lambda: os.getenv('HTTP_USER_AGENT', DEFAULT_USER_AGENT))

    # Proxy settings
    http_proxy_url: Optional[str] = field(default_factory=lambda: os.getenv('HTTP_PROXY_URL'))
    https_proxy_url: Optional[str] = field(default_factory=lambda: os.getenv('HTTPS_PROXY_URL'))
    webshare_username: Optional[str] = field(default_factory=lambda: os.getenv('WEBSHARE_PROXY_USERNAME'))
    webshare_password: Optional[str] = field(default_factory=lambda: os.getenv('WEBSHARE_PROXY_PASSWORD'))

# =============================================================================
# YOUTUBE CONFIGURATION
# =============================================================================

@dataclass
class YouTubeConfig:
    """Endpoints and client identity used against YouTube."""
    watch_url: str = field(default_factory=lambda: os.getenv('YOUTUBE_WATCH_URL', 'https://www.youtube.com/watch?v={video_id}'))
    player_api_url: str = field(default_factory=lambda: os.getenv('YOUTUBE_PLAYER_API_URL', 'https://www.youtube.com/youtubei/v1/player'))
    client_name: str = field(default_factory=lambda: os.getenv('YOUTUBE_CLIENT_NAME', 'ANDROID'))
    client_version: str = field(default_factory=lambda: os.getenv('YOUTUBE_CLIENT_VERSION', '20.10.38'))
    cookies_path: Optional[str] = field(default_factory=lambda: os.getenv('YOUTUBE_COOKIES_TXT') or None)

# =============================================================================
# TRANSCRIPT CONFIGURATION
# =============================================================================

@dataclass
class TranscriptSettings:
    """Defaults for transcript selection and retrieval."""
    default_languages: List[str] = field(default_factory=lambda: _parse_list_env('TRANSCRIPT_DEFAULT_LANGUAGES', ['en']))
    catalog_source: str = field(default_factory=lambda: os.getenv('TRANSCRIPT_CATALOG_SOURCE', 'auto').lower())
    preserve_formatting: bool = field(default_factory=lambda: _parse_bool_env('TRANSCRIPT_PRESERVE_FORMATTING'))

# =============================================================================
# MAIN CONFIGURATION CLASS
# =============================================================================

@dataclass
class Config:
    """Main configuration class that aggregates all configuration sections."""
    app: AppConfig = field(default_factory=AppConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    youtube: YouTubeConfig = field(default_factory=YouTubeConfig)
    transcript: TranscriptSettings = field(default_factory=TranscriptSettings)


# Create global configuration instance
config = Config()

# =============================================================================
# CONFIGURATION VALIDATION
# =============================================================================

def validate_config(cfg: Optional[Config] = None) -> Tuple[bool, List[str]]:
    """
    Validate the configuration.

    Returns:
        Tuple of (is_valid, problems)
    """
    cfg = cfg or config
    problems = []

    if cfg.transcript.catalog_source not in CATALOG_SOURCES:
        problems.append(
            f"TRANSCRIPT_CATALOG_SOURCE must be one of {', '.join(CATALOG_SOURCES)}, "
            f"got '{cfg.transcript.catalog_source}'"
        )

    if bool(cfg.network.webshare_username) != bool(cfg.network.webshare_password):
        problems.append('WEBSHARE_PROXY_USERNAME and WEBSHARE_PROXY_PASSWORD must be set together')

    if cfg.youtube.cookies_path and not Path(cfg.youtube.cookies_path).exists():
        problems.append(f"Cookie file not found: {cfg.youtube.cookies_path}")

    return len(problems) == 0, problems


def setup_logging(cfg: Optional[Config] = None) -> None:
    """Apply the configured formats and level to the package loggers. DEBUG=true forces debug output."""
    cfg = cfg or config
    level = "DEBUG" if cfg.app.debug else cfg.logging.level
    set_log_format(cfg.logging.format, cfg.logging.date_format)
    set_log_level(level)
    get_logger("youtube_transcript", level)


def proxy_config_from_settings(cfg: Optional[Config] = None):
    """Build a proxy configuration from the network settings, if any are set."""
    from ..proxies import GenericProxyConfig, WebshareProxyConfig

    cfg = cfg or config
    network = cfg.network
    if network.webshare_username and network.webshare_password:
        return WebshareProxyConfig(network.webshare_username, network.webshare_password)
    if network.http_proxy_url or network.https_proxy_url:
        return GenericProxyConfig(network.http_proxy_url, network.https_proxy_url)
    return None
