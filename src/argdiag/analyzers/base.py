from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from argdiag.catalog import Outcome
from argdiag.cause import Cause

logger = logging.getLogger(__name__)

type Analyzer = Callable[[Sequence[object], Cause], list[Outcome]]
type AnalyzerKey = tuple[str, int | None]

ANY_ARITY: None = None


@dataclass(frozen=True, slots=True)
class AnalyzerTable:
    family: str
    entries: Mapping[AnalyzerKey, Analyzer]
    fallback: Analyzer | None = None

    def __post_init__(self) -> None:
        if not self.family:
            raise ValueError("analyzer family must be non-empty")
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def resolve(self, name: str, arity: int) -> Analyzer | None:
        analyzer = self.entries.get((name, arity))
        if analyzer is None:
            analyzer = self.entries.get((name, ANY_ARITY))
        if analyzer is None:
            analyzer = self.fallback
        return analyzer

    def analyze(self, name: str, args: Sequence[object], cause: Cause) -> list[Outcome]:
        analyzer = self.resolve(name, len(args))
        if analyzer is None:
            logger.debug("no %s analyzer for %s/%d", self.family, name, len(args))
            return []
        return analyzer(args, cause)

    def operations(self) -> tuple[AnalyzerKey, ...]:
        return tuple(
            sorted(self.entries, key=lambda key: (key[0], -1 if key[1] is None else key[1]))
        )


def build_table(
    family: str,
    entries: Iterable[tuple[str, int | None, Analyzer]],
    *,
    fallback: Analyzer | None = None,
) -> AnalyzerTable:
    table: dict[AnalyzerKey, Analyzer] = {}
    for name, arity, analyzer in entries:
        key = (name, arity)
        if key in table:
            raise ValueError(f"duplicate {family} analyzer: {name}/{arity}")
        table[key] = analyzer
    return AnalyzerTable(family=family, entries=table, fallback=fallback)


def all_clear(results: Sequence[Outcome]) -> bool:
    return all(result is None for result in results)
