import sys
from typing import Any, NoReturn


EX_USAGE = 64
EX_SOFTWARE = 70


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def fail(code: int, format: str, *args: Any) -> NoReturn:
    printf_err(format, *args)
    sys.exit(code)
