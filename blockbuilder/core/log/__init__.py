"""Logging micro API for blockbuilder."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
