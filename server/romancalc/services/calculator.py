from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Callable

from romancalc.core.exceptions import AppError
from romancalc.models.calculator import CalculatorResult, NumeralSystem
from romancalc.services.numerals import (
    arabic_to_roman,
    is_arabic_numeral,
    is_roman_numeral,
    is_valid_operand_value,
    parse_arabic,
    roman_to_arabic,
)

logger = logging.getLogger("romancalc.calculator")


class CalculatorError(AppError):
    status_code = 400
    error_type = "CALCULATOR_ERROR"


class MalformedExpressionError(CalculatorError):
    error_type = "MALFORMED_EXPRESSION"


class MixedNumberSystemsError(CalculatorError):
    error_type = "MIXED_NUMBER_SYSTEMS"


class InvalidOperandsError(CalculatorError):
    error_type = "INVALID_OPERANDS"


class InvalidOperatorError(CalculatorError):
    error_type = "INVALID_OPERATOR"


class DivisionByZeroError(CalculatorError):
    error_type = "DIVISION_BY_ZERO"


class InvalidRomanResultError(CalculatorError):
    error_type = "INVALID_ROMAN_RESULT"


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


@dataclass(frozen=True)
class _Expression:
    left: str
    operator: str
    right: str

    @classmethod
    def parse(cls, raw: str) -> "_Expression":
        tokens = raw.strip().split(" ")
        if len(tokens) != 3:
            raise MalformedExpressionError("Некорректный формат математической операции")
        return cls(*tokens)


class CalculatorService:
    _BINARY_OPERATORS: dict[str, Callable[[int, int], int]] = {
        "+": operator.add,
        "-": operator.sub,
        "*": operator.mul,
        "/": _truncating_div,
    }

    def evaluate(self, expression: str) -> CalculatorResult:
        try:
            result = self._evaluate(expression)
        except CalculatorError as exc:
            logger.info(
                "calculator.rejected",
                extra={"expression": expression, "error_type": exc.error_type},
            )
            raise

        logger.info(
            "calculator.evaluate",
            extra={
                "expression": expression,
                "result": result.result,
                "numeral_system": result.numeral_system.value,
            },
        )
        return result

    def _evaluate(self, expression: str) -> CalculatorResult:
        parsed = _Expression.parse(expression)
        system = self._detect_system(parsed.left, parsed.right)

        left = self._resolve_operand(parsed.left, system)
        right = self._resolve_operand(parsed.right, system)
        if not is_valid_operand_value(left) or not is_valid_operand_value(right):
            raise InvalidOperandsError("Некорректные числа")

        value = self._apply(left, parsed.operator, right)

        return CalculatorResult(
            expression=expression,
            result=self._format(value, system),
            numeral_system=system,
        )

    def _detect_system(self, left: str, right: str) -> NumeralSystem:
        left_arabic, right_arabic = is_arabic_numeral(left), is_arabic_numeral(right)
        left_roman, right_roman = is_roman_numeral(left), is_roman_numeral(right)

        if (left_arabic and right_roman) or (left_roman and right_arabic):
            raise MixedNumberSystemsError("Используются одновременно разные системы счисления")
        if left_arabic and right_arabic:
            return NumeralSystem.ARABIC
        if left_roman and right_roman:
            return NumeralSystem.ROMAN
        raise InvalidOperandsError("Некорректные числа")

    def _resolve_operand(self, token: str, system: NumeralSystem) -> int:
        if system is NumeralSystem.ROMAN:
            return roman_to_arabic(token)
        value = parse_arabic(token)
        if value is None:
            raise InvalidOperandsError("Некорректные числа")
        return value

    def _apply(self, left: int, symbol: str, right: int) -> int:
        operator_fn = self._BINARY_OPERATORS.get(symbol)
        if operator_fn is None:
            raise InvalidOperatorError("Некорректный оператор")

        try:
            return operator_fn(left, right)
        except ZeroDivisionError as exc:
            raise DivisionByZeroError("Деление на ноль") from exc

    def _format(self, value: int, system: NumeralSystem) -> str:
        if system is NumeralSystem.ARABIC:
            return str(value)

        numeral = arabic_to_roman(value)
        if not numeral:
            raise InvalidRomanResultError("Некорректный результат в римской системе счисления")
        return numeral
