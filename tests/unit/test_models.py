from __future__ import annotations

import pytest
from pydantic import ValidationError

from argdiag.models import DiagnosticReport, DiagnosticRequest, OperationIdentity

pytestmark = pytest.mark.unit


def _identity(arity: int = 2) -> OperationIdentity:
    return OperationIdentity(family="maps", name="get", arity=arity)


def test_identity_label_and_validation() -> None:
    assert _identity().label() == "maps:get/2"
    with pytest.raises(ValidationError):
        OperationIdentity(family="", name="get", arity=2)
    with pytest.raises(ValidationError):
        OperationIdentity(family="maps", name="get", arity=-1)
    with pytest.raises(ValidationError):
        OperationIdentity(family="maps", name="get", arity=2, module="maps")  # type: ignore[call-arg]


def test_request_arity_must_match_args() -> None:
    with pytest.raises(ValidationError):
        DiagnosticRequest(operation=_identity(), args=("k",))


def test_request_cause_defaults_and_coerces() -> None:
    request = DiagnosticRequest(operation=_identity(), args=("k", object()), cause=None)

    assert request.cause == "none"


def test_report_messages_are_sorted_and_bounded() -> None:
    report = DiagnosticReport(
        operation=_identity(),
        cause="none",
        messages={2: "not a map", 1: "not a key"},
    )

    assert list(report.messages) == [1, 2]
    with pytest.raises(ValidationError):
        DiagnosticReport(operation=_identity(), cause="none", messages={3: "not a map"})
    with pytest.raises(ValidationError):
        DiagnosticReport(operation=_identity(), cause="none", messages={0: "not a map"})
    with pytest.raises(ValidationError):
        DiagnosticReport(operation=_identity(), cause="none", messages={1: ""})


def test_models_are_immutable() -> None:
    report = DiagnosticReport(operation=_identity(), cause="none", messages={})

    with pytest.raises(ValidationError):
        report.cause = "id"
