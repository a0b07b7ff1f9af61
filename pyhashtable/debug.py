from itertools import groupby
from operator import itemgetter

from .shared import printf
from .table import Table


def print_table(table: Table):
    for slot, pairs in groupby(table.entries(), key=itemgetter(0)):
        printf("slot[{0:4d}]: ", slot)
        for _, key, value in pairs:
            print_pair(key, value)
        printf("\n")


def print_pair(key: str, value: str):
    printf("{0:s}={1:s} ", key, value)
