from __future__ import annotations

from collections.abc import Sequence

from argdiag.catalog import Outcome, ReasonTag
from argdiag.cause import Cause
from argdiag.validators import must_be_char_data, must_be_encoding

from .base import AnalyzerTable, build_table

NORMALIZATION_FUNCTIONS: tuple[str, ...] = tuple(
    f"characters_to_{form}_{target}"
    for form in ("nfc", "nfd", "nfkc", "nfkd")
    for target in ("binary", "list")
)


def _bad_char_data(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [ReasonTag.BAD_CHAR_DATA]


def _convert(args: Sequence[object], cause: Cause) -> list[Outcome]:
    chars, *encodings = args
    return [must_be_char_data(chars), *(must_be_encoding(encoding) for encoding in encodings)]


UNICODE_ANALYZERS: AnalyzerTable = build_table(
    "unicode",
    (
        ("characters_to_binary", 1, _bad_char_data),
        ("characters_to_binary", 2, _convert),
        ("characters_to_binary", 3, _convert),
        ("characters_to_list", 1, _bad_char_data),
        ("characters_to_list", 2, _convert),
        ("characters_to_list", 3, _convert),
        *((name, 1, _bad_char_data) for name in NORMALIZATION_FUNCTIONS),
    ),
)
