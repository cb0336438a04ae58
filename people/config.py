"""Configuration for People Service."""

import os
from typing import List, Optional


class Config:
    """Configuration class for the people API."""

    DEFAULT_HOST = "0.0.0.0"
    # The web client fetches from localhost:3000
    DEFAULT_PORT = 3000
    DEFAULT_CORS_ORIGINS = "*"
    DEFAULT_LOG_LEVEL = "INFO"
    # Names understood by both logging and uvicorn
    LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

    @classmethod
    def get_host(cls, override_host: Optional[str] = None) -> str:
        """Get the interface the API binds to.

        Args:
            override_host: Optional host to override the default

        Returns:
            Host name or address
        """
        if override_host:
            return override_host

        return os.getenv("PEOPLE_HOST") or cls.DEFAULT_HOST

    @classmethod
    def get_port(cls, override_port: Optional[int] = None) -> int:
        """Get the port the API listens on.

        Args:
            override_port: Optional port to override the default

        Returns:
            Port number

        Raises:
            ValueError: If PEOPLE_PORT is not an integer
        """
        if override_port is not None:
            return override_port

        env_port = os.getenv("PEOPLE_PORT")
        if env_port:
            try:
                return int(env_port)
            except ValueError:
                raise ValueError(
                    f"PEOPLE_PORT must be an integer, got {env_port!r}"
                )

        return cls.DEFAULT_PORT

    @classmethod
    def get_cors_origins(cls, override_origins: Optional[str] = None) -> List[str]:
        """Get the origins allowed to call the API from a browser.

        Args:
            override_origins: Optional comma separated origins

        Returns:
            List of origins
        """
        raw = (
            override_origins
            or os.getenv("PEOPLE_CORS_ORIGINS")
            or cls.DEFAULT_CORS_ORIGINS
        )
        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    @classmethod
    def get_log_level(cls, override_level: Optional[str] = None) -> str:
        """Get the log level name shared by logging and uvicorn.

        Raises:
            ValueError: If the level is not one of LOG_LEVELS
        """
        level = override_level or os.getenv("PEOPLE_LOG_LEVEL") or cls.DEFAULT_LOG_LEVEL
        level = level.upper()
        if level not in cls.LOG_LEVELS:
            raise ValueError(
                f"PEOPLE_LOG_LEVEL must be one of {', '.join(cls.LOG_LEVELS)}, got {level!r}"
            )
        return level


# Global configuration instance
config = Config()
