import sys

from .debug import print_table
from .shared import EX_SOFTWARE, EX_USAGE, fail
from .table import (
    TABLE_SIZE,
    AllocationFailure,
    debug_trace_table,
    init_table,
    set_debug_trace_table,
)


REGIONS = [
    ("madrid", "madrid"),
    ("cataluña", "barcelona"),
    ("valencia", "valencia"),
    ("euskadi", "vitoria-gasteiz"),
    ("navarra", "pamplona"),
    ("aragón", "zaragoza"),
    ("la rioja", "logroño"),
    ("asturias", "oviedo"),
    ("cantabria", "santander"),
    ("galicia", "santiago de compostela"),
    ("castilla y león", "burgos"),
    ("castilla la mancha", "toledo"),
    ("andalucía", "sevilla"),
    ("extremadura", "mérida"),
    ("murcia", "murcia"),
    ("canarias", "las palmas"),
    ("baleares", "palma"),
    ("ceuta", "ceuta"),
    ("melilla", "melilla"),
]


def parse_capacity(arg: str) -> int:
    try:
        capacity = int(arg)
    except ValueError:
        fail(EX_USAGE, "Capacity must be an integer, got '{0:s}'.\n", arg)
    if capacity < 1:
        fail(EX_USAGE, "Capacity must be positive, got {0:d}.\n", capacity)
    return capacity


def main(argv: list[str] | None = None):
    args = sys.argv[1:] if argv is None else argv

    trace = False
    if args and args[0] == "--trace":
        trace = True
        args = args[1:]

    if len(args) == 0:
        capacity = TABLE_SIZE
    elif len(args) == 1:
        capacity = parse_capacity(args[0])
    else:
        fail(EX_USAGE, "Usage: pyhashtable [--trace] [capacity]\n")

    previous = debug_trace_table()
    set_debug_trace_table(previous or trace)
    try:
        table = init_table(capacity)
        for region, capital in REGIONS:
            if isinstance(table.set(region, capital), AllocationFailure):
                fail(EX_SOFTWARE, "Out of memory storing '{0:s}'.\n", region)
    finally:
        set_debug_trace_table(previous)

    print_table(table)
