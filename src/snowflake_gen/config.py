"""Global configuration for snowflake-gen.

This module provides a package-wide configuration surface for the settings
that sit around the deterministic core: the recursion depth cap applied by the
:class:`~snowflake_gen.snowflake.Snowflake` facade, the number of decimals used
when serializing coordinates, and the package log level. Defaults can be
overridden through environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import contextlib
import logging
import os
from typing import ContextManager, Iterator, Optional


# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
_LOGGER = logging.getLogger("snowflake_gen.config")
_PACKAGE_LOGGER = logging.getLogger("snowflake_gen")


def _parse_log_level(val: str | int | None, default: int = logging.WARNING) -> int:
    """Parse a logging level string or int into a `logging` level constant.

    Args:
        val: The desired level (e.g., "DEBUG", 10). May be None.
        default: Fallback level if `val` cannot be parsed.

    Returns:
        An integer logging level (e.g., logging.DEBUG).
    """
    if val is None:
        return default
    if isinstance(val, int):
        return val
    lvl = getattr(logging, str(val).strip().upper(), None)
    if isinstance(lvl, int):
        return lvl
    return default


def set_log_level(level: str | int = "WARNING") -> None:
    """Set the package logger level programmatically.

    Args:
        level: A standard logging level name or integer.
    """
    _PACKAGE_LOGGER.setLevel(_parse_log_level(level))


# Default level can be overridden by env.
set_log_level(os.getenv("SNOWFLAKE_GEN_LOGLEVEL", "WARNING"))


# -----------------------------------------------------------------------------
# Env helpers
# -----------------------------------------------------------------------------
def bool_env(varname: str, default: bool) -> bool:
    """Read an environment variable and interpret it as a boolean.

    True values: 'y', 'yes', 't', 'true', 'on', '1'.
    False values: 'n', 'no', 'f', 'false', 'off', '0'.

    Args:
        varname: The name of the environment variable.
        default: The default value if the variable is unset.

    Returns:
        A boolean value parsed from the environment.

    Raises:
        ValueError: If the variable holds something that is not a truth value.
    """
    val = os.getenv(varname, str(default))
    val = val.lower()
    if val in ("y", "yes", "t", "true", "on", "1"):
        return True
    if val in ("n", "no", "f", "false", "off", "0"):
        return False
    raise ValueError(f"invalid truth value {val!r} for environment {varname!r}")


def int_env(varname: str, default: int) -> int:
    """Read an environment variable and interpret it as an integer.

    Args:
        varname: The name of the environment variable.
        default: The default value if the variable is unset.

    Returns:
        The integer value parsed from the environment.
    """
    return int(os.getenv(varname, str(default)))


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Settings:
    """Snapshot of the tunable settings."""

    max_depth: int = 8
    decimals: int = 2


def _settings_from_env() -> Settings:
    """Build settings from SNOWFLAKE_GEN_* environment variables."""
    settings = Settings(
        max_depth=int_env("SNOWFLAKE_GEN_MAX_DEPTH", Settings.max_depth),
        decimals=int_env("SNOWFLAKE_GEN_DECIMALS", Settings.decimals),
    )
    _LOGGER.debug("Settings from env: %s", settings)
    return settings


# -----------------------------------------------------------------------------
# Config singleton
# -----------------------------------------------------------------------------
class Config:
    """Global configuration for snowflake-gen.

    Holds the active :class:`Settings` and lets callers swap them globally or
    temporarily through a context manager.
    """

    def __init__(self) -> None:
        """Initialize config using environment defaults."""
        self._settings = _settings_from_env()
        _LOGGER.info(
            "Config initialized: max_depth=%d decimals=%d",
            self._settings.max_depth,
            self._settings.decimals,
        )

    def configure(
        self,
        *,
        max_depth: Optional[int] = None,
        decimals: Optional[int] = None,
    ) -> Config:
        """Update the active settings.

        Args:
            max_depth: Largest recursion depth the facade will pass to the core.
            decimals: Digits after the decimal point in serialized paths.

        Returns:
            The `Config` instance (for chaining).
        """
        changes = {}
        if max_depth is not None:
            changes["max_depth"] = int(max_depth)
        if decimals is not None:
            changes["decimals"] = int(decimals)
        self._settings = replace(self._settings, **changes)
        _LOGGER.info(
            "Reconfigured: max_depth=%d decimals=%d",
            self._settings.max_depth,
            self._settings.decimals,
        )
        return self

    @contextlib.contextmanager
    def use(
        self,
        *,
        max_depth: Optional[int] = None,
        decimals: Optional[int] = None,
    ) -> Iterator[Config]:
        """Temporarily change settings within a context manager.

        Args:
            max_depth: Optional temporary depth cap.
            decimals: Optional temporary coordinate precision.

        Yields:
            The `Config` instance. Restores the previous settings on exit.
        """
        prev = self._settings
        try:
            self.configure(max_depth=max_depth, decimals=decimals)
            yield self
        finally:
            self._settings = prev
            _LOGGER.info("Restored previous settings: %s", self._settings)

    @property
    def settings(self) -> Settings:
        """Return the active settings snapshot."""
        return self._settings

    @property
    def max_depth(self) -> int:
        """Return the recursion depth cap."""
        return self._settings.max_depth

    @property
    def decimals(self) -> int:
        """Return the coordinate precision used by the serializer."""
        return self._settings.decimals


# Singleton & forwards
config = Config()


def configure(
    *,
    max_depth: Optional[int] = None,
    decimals: Optional[int] = None,
) -> Config:
    """Update the active settings (module-level)."""
    return config.configure(max_depth=max_depth, decimals=decimals)


def use(
    *,
    max_depth: Optional[int] = None,
    decimals: Optional[int] = None,
) -> ContextManager[Config]:
    """Temporarily change settings within a context manager (module-level)."""
    return config.use(max_depth=max_depth, decimals=decimals)
