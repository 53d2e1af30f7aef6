"""HTTP client for the calculation service."""
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

from calculator_app.common.logger import logger
from calculator_app.common.models import CalculationRequest, CalculationResult


class CalculationServiceError(Exception):
    """Raised when the calculation service cannot produce a result."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CalculationClient(BaseModel):
    """
    HTTP client responsible for sending two operands to the calculation service and receiving their sum.

    The HTTP client:
    - encodes the operands as a CalculationRequest JSON body
    - performs a single POST /calculate round trip, without retry
    - decodes the response into a CalculationResult
    """

    # Make the Pydantic instance immutable (read-only), to prevent errors
    # that could be caused by changes to the network configuration during execution.
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default="http://127.0.0.1:8000", description="Calculation service base URL")
    timeout: Optional[float] = Field(default=None, gt=0, description="Request timeout in seconds, None waits indefinitely")

    def calculate(self, number1: float, number2: float) -> CalculationResult:
        """
        Ask the calculation service for the sum of two numbers.

        :param float number1: First operand
        :param float number2: Second operand

        :return: Result returned by the service
        :rtype: CalculationResult
        :raises ValueError: If an operand is not a number
        :raises CalculationServiceError: If the service is unreachable or answers with an error
        """
        request = CalculationRequest(number1=number1, number2=number2)

        logger.info(f"🌐 Sending calculation to {self.base_url}: {number1}, {number2}")
        try:
            with httpx.Client(base_url=self.base_url, timeout=self.timeout) as http:
                # The body is encoded by the model so NaN and Infinity operands survive the round trip
                response = http.post(
                    "/calculate",
                    content=request.model_dump_json(),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as exc:
            logger.error(f"🌐❌ Calculation service unreachable: {exc}")
            raise CalculationServiceError(f"Calculation service unreachable: {exc}") from exc

        if response.is_error:
            logger.error(f"🌐❌ Calculation service answered {response.status_code}: {response.text}")
            raise CalculationServiceError(
                f"Calculation service answered {response.status_code}",
                status_code=response.status_code,
            )

        try:
            result = CalculationResult.model_validate(response.json())
        except ValueError as exc:
            raise CalculationServiceError(
                f"Invalid response from calculation service: {exc}",
                status_code=response.status_code,
            ) from exc

        logger.info(f"🌐✅ Received result: {result.result}")
        return result
