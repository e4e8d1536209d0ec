from __future__ import annotations

import dataclasses

import pytest

from resulty import Cases

pytestmark = pytest.mark.unit


def test_cases_holds_both_handlers() -> None:
    cases = Cases(success=str.upper, failure=lambda e: "failed")

    assert cases.success("ok") == "OK"
    assert cases.failure(ValueError()) == "failed"


def test_cases_is_immutable() -> None:
    cases = Cases(success=str, failure=str)

    with pytest.raises(dataclasses.FrozenInstanceError):
        cases.success = repr  # type: ignore[misc]


def test_cases_requires_both_handlers() -> None:
    with pytest.raises(TypeError):
        Cases(success=str)  # type: ignore[call-arg]
