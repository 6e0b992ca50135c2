# itsa:header:start
#
#   project      : itsa
#   file         : __init__.py
#   file_relpath : src/itsa/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Subcommands of the itsa CLI, one module per command."""
