from __future__ import annotations

import logging
import sys
from typing import TextIO

from romancalc.core.config import get_settings
from romancalc.core.context import correlation_scope
from romancalc.core.logging import configure_logging
from romancalc.services.calculator import CalculatorError, CalculatorService

logger = logging.getLogger("romancalc.cli")

PROMPT = "Введите выражение:"
RESULT_PREFIX = "Результат:"
ERROR_PREFIX = "Ошибка:"


def run(stdin: TextIO, stdout: TextIO, service: CalculatorService | None = None) -> None:
    service = service or CalculatorService()

    print(PROMPT, file=stdout)
    # readline() returns "" at EOF, which then fails as a malformed expression.
    expression = stdin.readline().strip()

    try:
        result = service.evaluate(expression)
    except CalculatorError as exc:
        print(ERROR_PREFIX, exc.message, file=stdout)
        return

    print(RESULT_PREFIX, result.result, file=stdout)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.cli_log_level)

    with correlation_scope() as correlation_id:
        logger.debug("cli.start", extra={"correlation_id": correlation_id})
        run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()
