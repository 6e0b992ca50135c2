# itsa:header:start
#
#   project      : itsa
#   file         : __init__.py
#   file_relpath : src/itsa/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Configuration for itsa: logging setup and the user configuration file."""

from __future__ import annotations

from itsa.config.settings import Business, ItsaConfig, default_config_path, load_config

__all__ = [
    "Business",
    "ItsaConfig",
    "default_config_path",
    "load_config",
]
