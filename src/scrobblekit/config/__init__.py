"""Configuration module for scrobblekit."""

from .settings import LastfmSettings, ObservabilitySettings, Settings, get_settings

__all__ = ["LastfmSettings", "ObservabilitySettings", "Settings", "get_settings"]
