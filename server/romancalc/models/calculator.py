from enum import Enum

from pydantic import BaseModel, Field


class NumeralSystem(str, Enum):
    ARABIC = "arabic"
    ROMAN = "roman"


class CalculatorResult(BaseModel):
    expression: str = Field(..., description="The expression exactly as it was submitted.")
    result: str = Field(..., description="The result, written in the same numeral system as the operands.")
    numeral_system: NumeralSystem = Field(..., description="Numeral system shared by both operands.")
