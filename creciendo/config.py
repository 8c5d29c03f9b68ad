"""
Runtime configuration for Creciendo Sano.

Settings are read from environment variables once and shared as a singleton.
"""

import os
from typing import Optional

from creciendo.models import Language


class CreciendoConfig:
  """Configuration for the API server, CLI and logging."""

  def __init__(self):
    self.host = os.environ.get("CRECIENDO_HOST", "0.0.0.0")
    self.port_raw = os.environ.get("CRECIENDO_PORT", "8000")
    self.language_raw = os.environ.get("CRECIENDO_LANGUAGE", Language.EN.value)
    self.log_level = os.environ.get("CRECIENDO_LOG_LEVEL", "INFO").upper()
    self.log_format = os.environ.get("CRECIENDO_LOG_FORMAT", "text").lower()
    self.cors_origins = [
      origin.strip()
      for origin in os.environ.get("CRECIENDO_CORS_ORIGINS", "*").split(",")
      if origin.strip()
    ]

  @property
  def port(self) -> int:
    """Server port as an integer."""
    return int(self.port_raw)

  @property
  def language(self) -> Language:
    """Default language for status labels and advice."""
    return Language(self.language_raw.strip().lower())

  def validate(self) -> None:
    """Raise error if any setting is malformed."""
    try:
      port = self.port
    except ValueError:
      raise ValueError(f"CRECIENDO_PORT must be an integer, got {self.port_raw!r}")
    if not 0 < port < 65536:
      raise ValueError(f"CRECIENDO_PORT out of range: {port}")
    try:
      self.language
    except ValueError:
      raise ValueError(
        f"CRECIENDO_LANGUAGE must be one of {[l.value for l in Language]}, got {self.language_raw!r}"
      )
    if self.log_format not in ("text", "json"):
      raise ValueError(f"CRECIENDO_LOG_FORMAT must be 'text' or 'json', got {self.log_format!r}")


# -----------------------------------------------------------------------------
# Singleton instance
# -----------------------------------------------------------------------------

_config: Optional[CreciendoConfig] = None


def get_config() -> CreciendoConfig:
  """Get the validated configuration (singleton)."""
  global _config
  if _config is None:
    config = CreciendoConfig()
    config.validate()
    _config = config
  return _config


def reset_config() -> None:
  """Reset the config singleton (useful for testing)."""
  global _config
  _config = None
