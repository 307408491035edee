"""
Configuration module for runtime settings.

Provides:
- YAML config loading with validation
- Environment variable substitution
- Settings defaults
"""

from .loader import ConfigLoader, Settings, load_settings

__all__ = ["ConfigLoader", "Settings", "load_settings"]
