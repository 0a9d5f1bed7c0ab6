"""Shared helpers for term-widgets."""

from tw_common.errors import ConfigurationError, TWError
from tw_common.logging import configure_logging

__all__ = ["configure_logging", "ConfigurationError", "TWError"]
