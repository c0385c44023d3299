"""
Module: config

Purpose:
    Application configuration (immutable) with validation on construction.
    Values can be overridden from CATALOG_PICKER_* environment variables.

Key Classes:
    - AppConfig: Endpoint, page sizes and HTTP settings for the app

Dependencies:
    - dataclasses (std)
    - os (std)

Used By:
    - catalog_picker.gui.app: Builds the source and controller
    - catalog_picker.gui.controller: Page sizes
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://api.artic.edu/api/v1"
ENV_PREFIX = "CATALOG_PICKER_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    """
    Configuration for the catalog picker (immutable).

    Attributes:
        base_url: Root of the collection API (no trailing slash needed)
        display_page_size: Rows shown per table page
        bulk_page_size: Page size used when walking the collection for bulk selection
        timeout_s: Per-request timeout in seconds; None disables it
        connect_retries: Transport-level connect retries handled by httpx
        log_level: Level name for the catalog_picker logger

    Example:
        >>> config = AppConfig(display_page_size=25)
        >>> config.bulk_page_size
        100
    """

    base_url: str = DEFAULT_BASE_URL
    display_page_size: int = 12
    bulk_page_size: int = 100
    timeout_s: Optional[float] = 20.0
    connect_retries: int = 1
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL: {self.base_url!r}")
        if self.display_page_size <= 0:
            raise ValueError(f"display_page_size must be positive: {self.display_page_size}")
        if self.bulk_page_size <= 0:
            raise ValueError(f"bulk_page_size must be positive: {self.bulk_page_size}")
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise ValueError(f"timeout_s must be positive or None: {self.timeout_s}")
        if self.connect_retries < 0:
            raise ValueError(f"connect_retries must be non-negative: {self.connect_retries}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}: {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for log_level."""
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """
        Build a config from CATALOG_PICKER_* environment variables.

        Unset variables keep their defaults. A timeout of "none" or "0"
        disables the request timeout.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Validated AppConfig

        Raises:
            ValueError: If a variable cannot be parsed or fails validation
        """
        env = os.environ if environ is None else environ
        kwargs: dict = {}

        def _get(name: str) -> Optional[str]:
            value = env.get(ENV_PREFIX + name)
            if value is None or not value.strip():
                return None
            return value.strip()

        value = _get("BASE_URL")
        if value is not None:
            kwargs["base_url"] = value.rstrip("/")
        value = _get("PAGE_SIZE")
        if value is not None:
            kwargs["display_page_size"] = _parse_int("PAGE_SIZE", value)
        value = _get("BULK_PAGE_SIZE")
        if value is not None:
            kwargs["bulk_page_size"] = _parse_int("BULK_PAGE_SIZE", value)
        value = _get("TIMEOUT")
        if value is not None:
            if value.lower() in ("none", "0"):
                kwargs["timeout_s"] = None
            else:
                try:
                    kwargs["timeout_s"] = float(value)
                except ValueError:
                    raise ValueError(f"{ENV_PREFIX}TIMEOUT must be a number: {value!r}") from None
        value = _get("CONNECT_RETRIES")
        if value is not None:
            kwargs["connect_retries"] = _parse_int("CONNECT_RETRIES", value)
        value = _get("LOG_LEVEL")
        if value is not None:
            kwargs["log_level"] = value.upper()

        return cls(**kwargs)


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer: {value!r}") from None
