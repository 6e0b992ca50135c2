# itsa:header:start
#
#   project      : itsa
#   file         : constants.py
#   file_relpath : src/itsa/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""itsa Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PROD_NAME: str = "itsa"

ITSA_VERSION: str = get_version("itsa")

# Environment variables
COLOR_ENV_VAR: str = "ITSA_COLOR"
LOG_LEVEL_ENV_VAR: str = "ITSA_LOG_LEVEL"
SET_DATE_ENV_VAR: str = "ITSA_SET_DATE"

# Location of the user configuration, relative to $HOME
CONFIG_RELPATH: str = ".config/itsa/config.json"
