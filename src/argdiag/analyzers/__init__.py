from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from .base import ANY_ARITY, Analyzer, AnalyzerKey, AnalyzerTable, all_clear, build_table
from .binary import BINARY_ANALYZERS
from .lists import LISTS_ANALYZERS
from .maps import MAPS_ANALYZERS
from .numeric import MATH_ANALYZERS
from .regex import RE_ANALYZERS
from .table import TABLE_ANALYZERS
from .unicode import UNICODE_ANALYZERS


class Family(StrEnum):
    BINARY = "binary"
    TABLE = "table"
    LISTS = "lists"
    MAPS = "maps"
    MATH = "math"
    RE = "re"
    UNICODE = "unicode"


FAMILY_ANALYZERS: Mapping[str, AnalyzerTable] = MappingProxyType(
    {
        Family.BINARY.value: BINARY_ANALYZERS,
        Family.TABLE.value: TABLE_ANALYZERS,
        Family.LISTS.value: LISTS_ANALYZERS,
        Family.MAPS.value: MAPS_ANALYZERS,
        Family.MATH.value: MATH_ANALYZERS,
        Family.RE.value: RE_ANALYZERS,
        Family.UNICODE.value: UNICODE_ANALYZERS,
    }
)

__all__ = [
    "ANY_ARITY",
    "Analyzer",
    "AnalyzerKey",
    "AnalyzerTable",
    "FAMILY_ANALYZERS",
    "Family",
    "all_clear",
    "build_table",
]
