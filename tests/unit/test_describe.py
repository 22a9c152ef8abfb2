from __future__ import annotations

import pytest

from argdiag.describe import StackFrame, describe_failure, describe_request, format_error
from argdiag.models import DiagnosticRequest, OperationIdentity
from argdiag.terms import TableRef

pytestmark = pytest.mark.unit


def test_describe_failure_accepts_identity_or_tuple() -> None:
    identity = OperationIdentity(family="maps", name="keys", arity=1)

    assert describe_failure(identity, ("x",)) == {1: "not a map"}
    assert describe_failure(("maps", "keys", 1), ("x",)) == {1: "not a map"}


def test_describe_failure_unknown_family_or_arity_mismatch() -> None:
    assert describe_failure(("gen_server", "call", 2), ("a", "b")) == {}
    assert describe_failure(("maps", "keys", 2), ("x",)) == {}
    assert describe_failure(("maps", "keys", -1), ()) == {}


def test_describe_request_builds_report() -> None:
    request = DiagnosticRequest(
        operation=OperationIdentity(family="math", name="sqrt", arity=1),
        args=(-4,),
    )
    report = describe_request(request)

    assert report.cause == "none"
    assert report.messages == {1: "is outside the domain for this function"}


def test_format_error_reads_top_frame() -> None:
    frame = StackFrame(
        module="ets",
        function="lookup",
        args=(TableRef(id=1), "k"),
        info={"error_info": {"cause": "id"}},
    )
    caller = StackFrame(module="app", function="run", args=0)

    assert format_error("badarg", [frame, caller]) == {
        1: "the table identifier does not refer to an existing table"
    }


def test_format_error_without_usable_frame() -> None:
    assert format_error("badarg", []) == {}
    assert format_error("badarg", [StackFrame(module="maps", function="get", args=2)]) == {}


def test_stack_frame_cause_defaults_to_none() -> None:
    assert StackFrame(module="maps", function="get", args=()).cause() == "none"
    assert StackFrame(module="maps", function="get", args=(), info={"error_info": 1}).cause() == (
        "none"
    )
