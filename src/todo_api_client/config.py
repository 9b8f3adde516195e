"""
Configuration constants for the TODO API client.

This module centralizes the endpoint, timeout and logging parameters
so the client can be pointed at a different service or test server.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field


DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


@dataclass
class APIConfig:
    """API configuration settings."""
    base_url: str = field(
        default_factory=lambda: os.environ.get("TODO_API_BASE_URL", DEFAULT_BASE_URL)
    )
    todos_endpoint: str = "/todos"
    timeout_seconds: float = 10.0


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "todo_api_client.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
