# licensemark:header:start
#
#   project      : LicenseMark
#   file         : __init__.py
#   file_relpath : src/licensemark/formats/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Header formats, one stateless singleton per comment syntax.

Importing this package registers the built-in formats:

| name     | syntax            |
| -------- | ----------------- |
| `cblock` | ``/* ... */``     |
| `xml`    | ``<!-- ... -->``  |
| `slash`  | ``// ...``        |
| `pound`  | ``# ...``         |
"""

from __future__ import annotations

from licensemark.formats.base import HeaderFormat, HeaderReadResult, detect_separator
from licensemark.formats.cblock import CBLOCK, CBlockHeaderFormat
from licensemark.formats.pound import POUND, PoundHeaderFormat
from licensemark.formats.registry import format_for_path, get_format, registered_formats
from licensemark.formats.slash import SLASH, SlashHeaderFormat
from licensemark.formats.xml import XML, XmlHeaderFormat

__all__ = [
    "CBLOCK",
    "POUND",
    "SLASH",
    "XML",
    "CBlockHeaderFormat",
    "HeaderFormat",
    "HeaderReadResult",
    "PoundHeaderFormat",
    "SlashHeaderFormat",
    "XmlHeaderFormat",
    "detect_separator",
    "format_for_path",
    "get_format",
    "registered_formats",
]
