"""Test classes CalculationRequest and CalculationResult."""
import json
import math

from pydantic import ValidationError
import pytest

from calculator_app.common.models import CalculationRequest, CalculationResult


def test_calculation_request_valid() -> None:
    """Test that a valid CalculationRequest can be created."""
    req = CalculationRequest(number1=2.5, number2=3.5)
    assert req.number1 == 2.5
    assert req.number2 == 3.5


def test_calculation_request_accepts_integers() -> None:
    """Test that integer operands are accepted and stored as floats."""
    req = CalculationRequest(number1=2, number2=3)
    assert req.number1 == 2.0
    assert isinstance(req.number1, float)


@pytest.mark.parametrize("value", ["3", "abc", None, True, [1], {"x": 1}])
def test_calculation_request_invalid_type(value) -> None:
    """Test that non-numeric operands raise a validation error."""
    with pytest.raises(ValidationError):
        CalculationRequest(number1=value, number2=1.0)


def test_calculation_request_missing_field() -> None:
    """Test that a request without number2 raises a validation error."""
    with pytest.raises(ValidationError):
        CalculationRequest(number1=1.0)


def test_calculation_request_accepts_non_finite() -> None:
    """Test that NaN and Infinity are not rejected."""
    req = CalculationRequest(number1=float("nan"), number2=float("inf"))
    assert math.isnan(req.number1)
    assert math.isinf(req.number2)


def test_calculation_request_is_immutable() -> None:
    """Test that a request cannot be modified once built."""
    req = CalculationRequest(number1=1.0, number2=2.0)
    with pytest.raises(ValidationError):
        req.number1 = 5.0


def test_calculation_result_valid() -> None:
    """Test that a valid CalculationResult can be created."""
    res = CalculationResult(result=6.0)
    assert res.result == 6.0
    assert isinstance(res.result, float)


def test_calculation_result_invalid_type() -> None:
    """Test that invalid result type raises a validation error."""
    with pytest.raises(ValidationError):
        CalculationResult(result="not a float")


def test_calculation_result_json_body() -> None:
    """Test that the result serializes to the wire format."""
    assert json.loads(CalculationResult(result=6.0).model_dump_json()) == {"result": 6.0}


def test_calculation_result_json_non_finite() -> None:
    """Test that non-finite results are written as JSON constants, not null."""
    body = json.loads(CalculationResult(result=float("inf")).model_dump_json())
    assert body["result"] == float("inf")
    body = json.loads(CalculationResult(result=float("nan")).model_dump_json())
    assert math.isnan(body["result"])
