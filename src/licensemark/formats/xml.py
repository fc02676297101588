# licensemark:header:start
#
#   project      : LicenseMark
#   file         : xml.py
#   file_relpath : src/licensemark/formats/xml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""XML/HTML-style comment headers (``<!-- ... -->``).

Interior lines are indented with one tab character and the markers sit on
lines of their own. Anything but whitespace before the comment (an XML
declaration, a doctype) means the file has no header.
"""

from __future__ import annotations

from typing import Final

from licensemark.formats.base import HeaderFormat
from licensemark.formats.mixins import BlockCommentMixin
from licensemark.formats.registry import register_format


class XmlHeaderFormat(BlockCommentMixin, HeaderFormat):
    """Header format for ``<!-- ... -->`` comments."""

    name = "xml"
    description = "XML/HTML comment (<!-- ... -->)"
    extensions = (".fxml", ".htm", ".html", ".svg", ".xhtml", ".xml", ".xsd", ".xsl", ".xslt")
    opening = "<!--"
    closing = "-->"
    closing_line = "-->"
    indent = "\t"


XML: Final[XmlHeaderFormat] = register_format(XmlHeaderFormat())
