# itsa:header:start
#
#   project      : itsa
#   file         : __init__.py
#   file_relpath : src/itsa/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Click-based command-line interface for itsa."""
