"""Pydantic models for calculation requests and results."""
from pydantic import BaseModel, ConfigDict, Field


class CalculationRequest(BaseModel):
    """Represents the two operands sent to the calculation service."""

    # Strict mode accepts JSON integers and floats but refuses strings, booleans and null.
    # NaN and Infinity stay allowed and are written as JSON constants.
    model_config = ConfigDict(frozen=True, strict=True, ser_json_inf_nan="constants")

    number1: float = Field(..., description="First operand")
    number2: float = Field(..., description="Second operand")


class CalculationResult(BaseModel):
    """Represents the sum returned by the calculation service."""

    # Non-finite results are written as the NaN / Infinity JSON constants instead of null
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    result: float = Field(..., description="Sum of number1 and number2")
