"""Configuration module using Pydantic Settings.

Usage:
    from fieldkit.config import FieldkitSettings

    settings = FieldkitSettings(warn_undecodable=True)
"""

from fieldkit.config.settings import FieldkitSettings

__all__ = [
    "FieldkitSettings",
]
