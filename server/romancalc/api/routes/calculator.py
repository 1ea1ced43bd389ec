from fastapi import APIRouter, Depends, Query

from romancalc.models.calculator import CalculatorResult
from romancalc.services.calculator import CalculatorService

router = APIRouter(tags=["calculator"])


def get_calculator_service() -> CalculatorService:
    return CalculatorService()


@router.get("/calc", response_model=CalculatorResult)
async def evaluate_calculator_expression(
    query: str = Query(..., description="Expression such as '3 + 4' or 'IX + II'."),
    service: CalculatorService = Depends(get_calculator_service),
) -> CalculatorResult:
    return service.evaluate(query)
