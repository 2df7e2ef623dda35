"""Manifest — parse / dump des documents Hero stockés (+ migration legacy)."""
from .parser import parse_document, dump_document, upgrade_legacy_document, RESPONSIVE_FIELDS

__all__ = [
    "parse_document",
    "dump_document",
    "upgrade_legacy_document",
    "RESPONSIVE_FIELDS",
]
