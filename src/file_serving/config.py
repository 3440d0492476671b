import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Only operational settings (bind address, log level) come from the
    environment. Backing file locations are fixed relative to the package.
    """

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "3000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Backing files
    files_dir: Path = PACKAGE_DIR / "file"
    buffer_file_name: str = "buffer.txt"
    stream_file_name: str = "stream.txt"

    # Streaming
    stream_chunk_size: int = 64 * 1024  # characters per read
    large_stream_count: int = 10_000

    @property
    def buffer_file_path(self) -> Path:
        """Path of the file served by GET /buffer."""
        return self.files_dir / self.buffer_file_name

    @property
    def stream_file_path(self) -> Path:
        """Path of the file served by GET /stream."""
        return self.files_dir / self.stream_file_name

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 0 <= self.api_port <= 65535:
            raise ValueError(f"API_PORT must be between 0 and 65535, got {self.api_port}")

        if self.stream_chunk_size <= 0:
            raise ValueError("stream_chunk_size must be positive")

        if self.large_stream_count < 0:
            raise ValueError("large_stream_count must not be negative")

        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a valid logging level, got {self.log_level!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once for the process.

    Args:
        level: Log level name. Defaults to settings.log_level.
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
