"""
Configuration module for the DeathNote API.
Exports the settings singleton.
"""

from config.settings import Settings, settings

__all__ = ["Settings", "settings"]
