"""Configuration module for Nova POS."""

from nova_pos.config.logging import configure_logging
from nova_pos.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
