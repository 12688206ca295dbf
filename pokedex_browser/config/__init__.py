"""
Application configuration: settings model and the loader that reads
global.json plus environment overrides.
"""

from .config_loader import load_settings
from .model import AppSettings

__all__ = ["AppSettings", "load_settings"]
