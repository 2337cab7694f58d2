"""Runtime services: telemetry and engine settings."""

from .settings import EngineSettings

__all__ = ["EngineSettings"]
