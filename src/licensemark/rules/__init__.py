# licensemark:header:start
#
#   project      : LicenseMark
#   file         : __init__.py
#   file_relpath : src/licensemark/rules/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""License rules: templates, placeholder types and the file-to-rule resolver."""

from __future__ import annotations

from licensemark.rules.resolver import HeaderRule, Resolution, ResolvedBatch, RuleResolver
from licensemark.rules.template import HeaderTemplate, TemplateMatch

__all__ = [
    "HeaderRule",
    "HeaderTemplate",
    "Resolution",
    "ResolvedBatch",
    "RuleResolver",
    "TemplateMatch",
]
