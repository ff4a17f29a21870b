"""
Configuration settings for the swap simulator

Loads environment variables and provides application configuration.
The swap engine itself takes everything as arguments; these settings
only feed the quoting script and logging setup.
"""
import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings"""

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Quoting defaults
    SNAPSHOT_PATH: str = os.getenv("SNAPSHOT_PATH", "pool_snapshot.yaml")
    DEFAULT_FEE_TIER: int = int(os.getenv("DEFAULT_FEE_TIER", 3000))

    def get_log_level(self) -> int:
        """Numeric logging level, falls back to WARNING for unknown names"""
        level = logging.getLevelName(self.LOG_LEVEL)
        return level if isinstance(level, int) else logging.WARNING


# Create global settings instance
settings = Settings()
