# licensemark:header:start
#
#   project      : LicenseMark
#   file         : __main__.py
#   file_relpath : src/licensemark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Module entry point for running LicenseMark via ``python -m licensemark``.

Examples:
    Check the headers of a source tree::

        python -m licensemark check src
"""

from __future__ import annotations

from licensemark.cli.main import cli

if __name__ == "__main__":
    cli()
