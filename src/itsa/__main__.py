# itsa:header:start
#
#   project      : itsa
#   file         : __main__.py
#   file_relpath : src/itsa/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Module entry point for running itsa via ``python -m itsa``.

Delegates directly to :func:`itsa.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how itsa is launched.
"""

from __future__ import annotations

from itsa.cli.main import cli

if __name__ == "__main__":
    cli()
