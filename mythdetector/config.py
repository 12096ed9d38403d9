"""
Application Configuration - Environment Variable Management.
Loads and validates configuration from .env file.
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from project root
PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / ".env"

if ENV_FILE.exists():
    load_dotenv(ENV_FILE)
    logger.info(f"Loaded environment from {ENV_FILE}")
else:
    logger.warning(f".env file not found at {ENV_FILE}")


def is_configured(value: Optional[str]) -> bool:
    """False for missing, empty and PASTE_ placeholder values."""
    return bool(value and value.strip() and not value.startswith("PASTE_"))


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}={raw!r}, using {default}")
        return default


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}={raw!r}, using {default}")
        return default
    if value < minimum:
        logger.warning(f"{name}={value} is below {minimum}, using {default}")
        return default
    return value


@dataclass
class ProvidersConfig:
    """Remote API credentials, endpoints and timeouts."""
    imagga_api_key: Optional[str] = None
    imagga_api_secret: Optional[str] = None
    gemini_api_key: Optional[str] = None
    api_ninjas_key: Optional[str] = None

    imagga_api_url: str = "https://api.imagga.com/v2/tags"
    wikipedia_api_url: str = "https://en.wikipedia.org/w/api.php"
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta/models"
    gemini_model: str = "gemini-1.5-flash-latest"
    api_ninjas_url: str = "https://api.api-ninjas.com/v1/mythology"

    tagging_timeout: float = 15.0
    encyclopedia_timeout: float = 5.0  # enrichment only, keep below tagging
    narrative_timeout: float = 30.0
    directory_timeout: float = 10.0

    max_labels: int = 5

    @property
    def has_imagga(self) -> bool:
        return is_configured(self.imagga_api_key) and is_configured(self.imagga_api_secret)

    @property
    def has_gemini(self) -> bool:
        return is_configured(self.gemini_api_key)

    @property
    def has_api_ninjas(self) -> bool:
        return is_configured(self.api_ninjas_key)


@dataclass
class AppConfig:
    """Main Application Configuration."""
    providers: ProvidersConfig
    storage_backend: str = "sqlite"
    database_path: str = "data/mythdetector.db"
    max_upload_mb: int = 10
    debug: bool = False

    def __post_init__(self):
        """Validate critical configuration."""
        if self.storage_backend not in ("sqlite", "memory"):
            logger.warning(f"Unknown STORAGE_BACKEND '{self.storage_backend}' - falling back to sqlite")
            self.storage_backend = "sqlite"

    def validate(self) -> dict:
        """Validate configuration and return status."""
        return {
            "providers": {
                "imagga_configured": self.providers.has_imagga,
                "gemini_configured": self.providers.has_gemini,
                "api_ninjas_configured": self.providers.has_api_ninjas,
            },
            "database": {
                "backend": self.storage_backend,
                "path": self.database_path,
            },
            "ready_for_discovery": self.providers.has_imagga,
        }

    def log_status(self):
        """Log configuration status (without exposing keys)."""
        status = self.validate()

        logger.info("=" * 50)
        logger.info("Configuration Status:")
        logger.info(f"  Imagga Tagging API: {'OK' if status['providers']['imagga_configured'] else 'NOT CONFIGURED'}")
        logger.info(f"  Gemini Narrative API: {'OK' if status['providers']['gemini_configured'] else 'NOT CONFIGURED'}")
        logger.info(f"  API Ninjas Mythology: {'OK' if status['providers']['api_ninjas_configured'] else 'NOT CONFIGURED'}")
        logger.info(f"  Database: {status['database']['backend']}")
        logger.info("=" * 50)

        if not status["ready_for_discovery"]:
            logger.warning("Imagga credentials missing - image discovery will fail until configured")


def load_config() -> AppConfig:
    """Load configuration from environment variables."""
    defaults = ProvidersConfig()
    providers = ProvidersConfig(
        imagga_api_key=os.getenv("IMAGGA_API_KEY"),
        imagga_api_secret=os.getenv("IMAGGA_API_SECRET"),
        gemini_api_key=os.getenv("GEMINI_API_KEY"),
        api_ninjas_key=os.getenv("API_NINJAS_KEY"),
        imagga_api_url=os.getenv("IMAGGA_API_URL", defaults.imagga_api_url),
        wikipedia_api_url=os.getenv("WIKIPEDIA_API_URL", defaults.wikipedia_api_url),
        gemini_api_url=os.getenv("GEMINI_API_URL", defaults.gemini_api_url),
        gemini_model=os.getenv("GEMINI_MODEL", defaults.gemini_model),
        api_ninjas_url=os.getenv("API_NINJAS_URL", defaults.api_ninjas_url),
        tagging_timeout=_env_float("TAGGING_TIMEOUT_SECONDS", defaults.tagging_timeout),
        encyclopedia_timeout=_env_float("ENCYCLOPEDIA_TIMEOUT_SECONDS", defaults.encyclopedia_timeout),
        narrative_timeout=_env_float("NARRATIVE_TIMEOUT_SECONDS", defaults.narrative_timeout),
        directory_timeout=_env_float("DIRECTORY_TIMEOUT_SECONDS", defaults.directory_timeout),
        max_labels=_env_int("TAGGING_MAX_LABELS", defaults.max_labels),
    )

    return AppConfig(
        providers=providers,
        storage_backend=os.getenv("STORAGE_BACKEND", "sqlite").lower(),
        database_path=os.getenv("DATABASE_PATH", "data/mythdetector.db"),
        max_upload_mb=_env_int("MAX_UPLOAD_MB", 10),
        debug=os.getenv("DEBUG", "false").lower() == "true",
    )


# Global config instance
config = load_config()
