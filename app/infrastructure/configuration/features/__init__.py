"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.directory import DirectoryFeatureSettings

__all__ = [
    "DirectoryFeatureSettings",
]
