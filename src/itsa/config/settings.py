# itsa:header:start
#
#   project      : itsa
#   file         : settings.py
#   file_relpath : src/itsa/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""User configuration for itsa.

The configuration lives in ``$HOME/.config/itsa/config.json`` and is written
by ``itsa init`` in the full tool. Its shape is:

```json
{
  "production_api": false,
  "business_idx": 0,
  "businesses": [
    {"bid": "XAIS12345678901", "type": "self-employment",
     "name": "Widgets", "gnc_sqlite": "/home/me/accounts.gnucash"}
  ]
}
```

Loading is strict: a missing file, malformed JSON, or a missing
``business_idx`` / ``businesses`` entry raises `RuntimeError` with a message
suitable for the user. The CLI layer maps it to a configuration error.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from itsa.config.logging import get_logger
from itsa.constants import CONFIG_RELPATH

if TYPE_CHECKING:
    from itsa.config.logging import ItsaLogger

logger: ItsaLogger = get_logger(__name__)


@dataclass(frozen=True)
class Business:
    """A business registered with the tax authority.

    Attributes:
        bid (str): Business identifier.
        btype (str): Type of business (e.g. ``self-employment``).
        name (str | None): Trading name, when known.
        gnc_sqlite (str | None): Path to the ledger database holding its accounts.
    """

    bid: str
    btype: str
    name: str | None = None
    gnc_sqlite: str | None = None


@dataclass(frozen=True)
class ItsaConfig:
    """Immutable view of the user configuration.

    Attributes:
        production_api (bool): True to talk to the live API instead of the sandbox.
        business (Business | None): The currently selected business.
        businesses (tuple[Business, ...]): All configured businesses.
    """

    production_api: bool = False
    business: Business | None = None
    businesses: tuple[Business, ...] = ()


def default_config_path(home: Path | None = None) -> Path:
    """Return the location of the user configuration file."""
    return (home or Path.home()) / CONFIG_RELPATH


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _parse_business(raw: Any, idx: int) -> Business:
    if not isinstance(raw, dict):
        raise RuntimeError(f"read_config: business #{idx} is not an object.")
    bid = raw.get("bid")
    btype = raw.get("type")
    if not isinstance(bid, str) or not isinstance(btype, str):
        raise RuntimeError(f"read_config: business #{idx} needs 'bid' and 'type'.")
    return Business(
        bid=bid,
        btype=btype,
        name=_str_or_none(raw.get("name")),
        gnc_sqlite=_str_or_none(raw.get("gnc_sqlite")),
    )


def parse_config(data: dict[str, Any]) -> ItsaConfig:
    """Build an `ItsaConfig` from decoded JSON.

    Args:
        data (dict[str, Any]): Decoded top-level JSON object.

    Returns:
        ItsaConfig: The parsed configuration.

    Raises:
        RuntimeError: If required keys are missing or malformed.
    """
    production_api = data.get("production_api") is True

    bidx = data.get("business_idx")
    if bidx is None:
        raise RuntimeError("read_config: No 'business_idx' found.")
    businesses_raw = data.get("businesses")
    if businesses_raw is None:
        raise RuntimeError("read_config: No 'businesses' found.")
    if not isinstance(businesses_raw, list):
        raise RuntimeError("read_config: 'businesses' must be a list.")
    if isinstance(bidx, bool) or not isinstance(bidx, int):
        raise RuntimeError("read_config: 'business_idx' must be an integer.")

    businesses = tuple(_parse_business(raw, i) for i, raw in enumerate(businesses_raw))
    if not 0 <= bidx < len(businesses):
        raise RuntimeError(
            f"read_config: 'business_idx' {bidx} out of range (have {len(businesses)})."
        )

    return ItsaConfig(
        production_api=production_api,
        business=businesses[bidx],
        businesses=businesses,
    )


def load_config(path: Path | None = None) -> ItsaConfig:
    """Read and parse the configuration file.

    Args:
        path (Path | None): File to read; defaults to `default_config_path()`.

    Returns:
        ItsaConfig: The parsed configuration.

    Raises:
        RuntimeError: If the file cannot be read or is not valid.
    """
    cfg_path = path or default_config_path()
    logger.debug("Loading configuration from %s", cfg_path)
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"read_config: Unable to open config : {cfg_path}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"read_config: Malformed config {cfg_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise RuntimeError(f"read_config: Config {cfg_path} is not a JSON object.")
    return parse_config(data)


def api_banner_lines(config: ItsaConfig) -> list[str]:
    """Return the markup lines of the start-up banner.

    The banner tells the user which API (production or sandbox) and which
    business subsequent commands will act on.
    """
    api = "#RED#PRODUCTION#RST#" if config.production_api else "#TANG#TEST#RST#"
    lines = ["***\n", f"*** Using {api} API\n", "***\n"]
    if config.business is not None:
        name = config.business.name or ""
        lines.append(f"*** Using business : #BOLD#{name}#RST# [#BOLD#{config.business.bid}#RST#]\n")
        lines.append("***\n")
    return lines
