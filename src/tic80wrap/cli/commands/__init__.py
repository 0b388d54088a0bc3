# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : __init__.py
#   file_relpath : src/tic80wrap/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the Tic80Wrap CLI."""
