from __future__ import annotations

import logging
from collections.abc import Iterable

from .catalog import Outcome, expand_reason

logger = logging.getLogger(__name__)


def assemble(outcomes: Iterable[Outcome], arg_count: int) -> dict[int, str]:
    result: dict[int, str] = {}
    for position, outcome in enumerate(outcomes, start=1):
        if not outcome:
            continue
        if position > arg_count:
            logger.debug(
                "dropping outcome %r for position %d beyond %d arguments",
                outcome,
                position,
                arg_count,
            )
            continue
        result[position] = expand_reason(outcome)
    return result
