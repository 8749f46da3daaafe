"""Configuration package."""

from .manager import THEMES, ConfigManager

__all__ = ['THEMES', 'ConfigManager']
