"""Addition of two operands for the calculation service."""
import operator

from calculator_app.common.logger import logger
from calculator_app.common.models import CalculationRequest, CalculationResult


class Calculator:
    """
    Stateless calculator behind the /calculate endpoint.

    Design constraints:
        - Pure: no shared state between calls, identical inputs give identical outputs
        - Plain IEEE 754 double addition, NaN and Infinity propagate instead of being rejected
    """

    @staticmethod
    def add(number1: float, number2: float) -> float:
        """
        Add two numbers with floating-point semantics.

        :param float number1: First operand
        :param float number2: Second operand

        :return: number1 + number2
        :rtype: float
        """
        return float(operator.add(number1, number2))

    @staticmethod
    def calculate(request: CalculationRequest) -> CalculationResult:
        """
        Compute the result for a calculation request.

        :param CalculationRequest request: Validated operands

        :return: Result holding the sum of both operands
        :rtype: CalculationResult
        """
        result: float = Calculator.add(request.number1, request.number2)
        logger.debug(f"🧮 {request.number1} + {request.number2} = {result}")
        return CalculationResult(result=result)
