"""
Scorebook configuration.

Session and server defaults. All settings can be overridden via
environment variables; per-game scoring rules travel with each Game.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ScorebookConfig:
    """Process-wide defaults for scoring sessions and the API server."""

    # Default rules for new games and the live clock
    quarter_minutes: int = field(
        default_factory=lambda: int(os.getenv("SCOREBOOK_QUARTER_MINUTES", "12"))
    )
    tick_interval: float = field(
        default_factory=lambda: float(os.getenv("SCOREBOOK_TICK_INTERVAL", "1.0"))
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("SCOREBOOK_LOG_LEVEL", "INFO"))

    # API server
    host: str = field(default_factory=lambda: os.getenv("SCOREBOOK_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("SCOREBOOK_PORT", "8000")))
    cors_origins: list[str] = field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.getenv(
                "SCOREBOOK_CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
            ).split(",")
            if origin.strip()
        ]
    )

    @classmethod
    def from_env(cls) -> "ScorebookConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.quarter_minutes <= 0:
            errors.append("SCOREBOOK_QUARTER_MINUTES must be positive")
        if self.tick_interval <= 0:
            errors.append("SCOREBOOK_TICK_INTERVAL must be positive")
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown SCOREBOOK_LOG_LEVEL: {self.log_level}")
        if not 0 < self.port < 65536:
            errors.append(f"SCOREBOOK_PORT out of range: {self.port}")
        return errors


_config: Optional[ScorebookConfig] = None


def get_config() -> ScorebookConfig:
    """Get the global configuration."""
    global _config
    if _config is None:
        _config = ScorebookConfig.from_env()
    return _config


def set_config(config: Optional[ScorebookConfig]) -> None:
    """
    Replace the global configuration.

    Passing None makes the next get_config() re-read the environment.
    Useful in tests.
    """
    global _config
    _config = config
