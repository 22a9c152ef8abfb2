from __future__ import annotations

from collections.abc import Sequence

from argdiag.catalog import Outcome, ReasonTag
from argdiag.cause import Cause, CauseHint, table_cause
from argdiag.terms import ProcessHandle
from argdiag.validators import (
    is_element_spec,
    is_match_spec,
    is_update_op,
    must_be_objects,
    must_be_positive_integer,
    must_be_tuple,
)

from .base import Analyzer, AnalyzerTable, build_table


def _table_only(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [table_cause(args, cause)]


def _with_default(default: ReasonTag) -> Analyzer:
    def analyze(args: Sequence[object], cause: Cause) -> list[Outcome]:
        table_error = table_cause(args, cause)
        if table_error is not None:
            return [table_error]
        if len(args) < 2:
            return [None]
        return [None, default]

    return analyze


def _update_op_error(update_op: object) -> Outcome:
    return None if is_update_op(update_op) else ReasonTag.BAD_UPDATE_OP


def _delete_object(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [table_cause(args, cause), must_be_tuple(args[1])]


def _objects(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [table_cause(args, cause), must_be_objects(args[1])]


def _give_away(args: Sequence[object], cause: Cause) -> list[Outcome]:
    recipient = args[1]
    table_error = table_cause(args, cause)
    if cause == CauseHint.OWNER:
        return [table_error, ReasonTag.ALREADY_OWNER]
    if cause == CauseHint.NOT_OWNER:
        return [table_error, ReasonTag.NOT_OWNER]
    if not isinstance(recipient, ProcessHandle):
        return [table_error, ReasonTag.NOT_PID]
    if table_error is None:
        return [None, ReasonTag.DEAD_PROCESS]
    return [table_error]


def _lookup_element(args: Sequence[object], cause: Cause) -> list[Outcome]:
    table_error = table_cause(args, cause)
    position_error = must_be_positive_integer(args[2])
    if cause == CauseHint.BADKEY:
        return [table_error, ReasonTag.BAD_KEY, position_error]
    if table_error is None and position_error is None:
        return [None, None, ReasonTag.POSITION_PAST_OBJECT]
    return [table_error, None, position_error]


def _bad_continuation(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [ReasonTag.BAD_CONTINUATION]


def _limit(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [table_cause(args, cause), None, must_be_positive_integer(args[2])]


def _match_spec_limit(args: Sequence[object], cause: Cause) -> list[Outcome]:
    table_error, _, limit_error = _limit(args, cause)
    spec_error = None if is_match_spec(args[1]) else ReasonTag.BAD_MATCHSPEC
    return [table_error, spec_error, limit_error]


def _rename(args: Sequence[object], cause: Cause) -> list[Outcome]:
    table_error = table_cause(args, cause)
    name_error = None if isinstance(args[1], str) else ReasonTag.BAD_TABLE_NAME
    if table_error is None and name_error is None:
        return [None, ReasonTag.NAME_ALREADY_EXISTS]
    return [table_error, name_error]


def _update_counter(args: Sequence[object], cause: Cause) -> list[Outcome]:
    update_op = args[2]
    table_error = table_cause(args, cause)
    if cause == CauseHint.BADKEY:
        return [table_error, ReasonTag.BAD_KEY, _update_op_error(update_op)]
    if cause == CauseHint.KEYPOS:
        return [table_error, None, ReasonTag.SAME_AS_KEYPOS]
    if cause == CauseHint.POSITION:
        return [table_error, None, ReasonTag.UPDATE_OP_RANGE]
    if cause == CauseHint.NONE:
        if not is_update_op(update_op):
            return [table_error, None, ReasonTag.BAD_UPDATE_OP]
        # the only failure left once the update operation is well formed
        return [table_error, None, ReasonTag.COUNTER_NOT_INTEGER]
    return [table_error, None, _update_op_error(update_op)]


def _update_counter_with_default(args: Sequence[object], cause: Cause) -> list[Outcome]:
    update_op, default = args[2], args[3]
    table_error = table_cause(args, cause)
    if table_error is not None:
        return [table_error]
    default_error = must_be_tuple(default)
    if cause == CauseHint.BADKEY:
        return [None, ReasonTag.BAD_KEY, _update_op_error(update_op), default_error]
    if cause == CauseHint.KEYPOS:
        return [None, None, ReasonTag.SAME_AS_KEYPOS, default_error]
    if cause == CauseHint.POSITION:
        return [None, None, ReasonTag.UPDATE_OP_RANGE]
    update_op_error = _update_op_error(update_op)
    if update_op_error is None and default_error is None:
        # update operation and default object are individually valid
        return [None, None, ReasonTag.COUNTER_NOT_INTEGER]
    return [None, None, update_op_error, default_error]


def _update_element(args: Sequence[object], cause: Cause) -> list[Outcome]:
    table_error = table_cause(args, cause)
    if cause == CauseHint.KEYPOS:
        return [table_error, None, ReasonTag.SAME_AS_KEYPOS]
    if not is_element_spec(args[2]):
        return [table_error, None, ReasonTag.BAD_ELEMENT_SPEC]
    if table_error is None:
        return [None, None, ReasonTag.RANGE]
    return [table_error, None, None]


def _whereis(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [ReasonTag.BAD_TABLE_NAME]


TABLE_ANALYZERS: AnalyzerTable = build_table(
    "table",
    (
        ("delete_object", 2, _delete_object),
        ("give_away", 3, _give_away),
        ("info", 1, _with_default(ReasonTag.BAD_INFO_ITEM)),
        ("info", 2, _with_default(ReasonTag.BAD_INFO_ITEM)),
        ("insert", 2, _objects),
        ("insert_new", 2, _objects),
        ("lookup_element", 3, _lookup_element),
        ("match", 1, _bad_continuation),
        ("match", 3, _limit),
        ("match_object", 1, _bad_continuation),
        ("match_object", 3, _limit),
        ("next", 2, _with_default(ReasonTag.BAD_KEY)),
        ("prev", 2, _with_default(ReasonTag.BAD_KEY)),
        ("rename", 2, _rename),
        ("safe_fixtable", 2, _with_default(ReasonTag.BAD_BOOLEAN)),
        ("select", 1, _bad_continuation),
        ("select", 2, _with_default(ReasonTag.BAD_MATCHSPEC)),
        ("select", 3, _match_spec_limit),
        ("select_count", 2, _with_default(ReasonTag.BAD_MATCHSPEC)),
        ("select_count", 3, _match_spec_limit),
        ("internal_select_delete", 2, _with_default(ReasonTag.BAD_MATCHSPEC)),
        ("select_replace", 2, _with_default(ReasonTag.BAD_MATCHSPEC)),
        ("select_reverse", 2, _with_default(ReasonTag.BAD_MATCHSPEC)),
        ("select_reverse", 3, _match_spec_limit),
        ("setopts", 2, _with_default(ReasonTag.BAD_OPTIONS)),
        ("slot", 2, _with_default(ReasonTag.RANGE)),
        ("update_counter", 3, _update_counter),
        ("update_counter", 4, _update_counter_with_default),
        ("update_element", 3, _update_element),
        ("whereis", 1, _whereis),
    ),
    fallback=_table_only,
)
