# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : __main__.py
#   file_relpath : src/tic80wrap/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Tic80Wrap via ``python -m tic80wrap``.

Delegates directly to :func:`tic80wrap.cli.main.cli`, so the module interface
and the ``tic80wrap`` console script share a single entry point.

Examples:
    Wrap the bundles in ``dist/`` with the metadata of ``cartridge.js``::

        python -m tic80wrap wrap dist
"""

from __future__ import annotations

from tic80wrap.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
