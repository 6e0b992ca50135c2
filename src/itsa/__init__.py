# itsa:header:start
#
#   project      : itsa
#   file         : __init__.py
#   file_relpath : src/itsa/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""itsa package.

itsa is a command-line front end for UK Income Tax Self-Assessment (ITSA)
submissions. Every piece of program output goes through a small inline markup
language (``#RED#text#RST#``) that is expanded into terminal escape sequences.
"""

from __future__ import annotations
