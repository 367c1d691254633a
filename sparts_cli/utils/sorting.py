from functools import cmp_to_key
from typing import Callable, List, TypeVar

from sparts_cli.models.supplier.dto import SupplierRecord

T = TypeVar("T")


def sort_by(items: List[T], less: Callable[[T, T], bool]) -> List[T]:
    """
    Sorts items in place using a "less than" comparator. Equal items may end up in any order.
    """

    def compare(a: T, b: T) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    items.sort(key=cmp_to_key(compare))
    return items


def sort_supplier_list(suppliers: List[SupplierRecord]) -> List[SupplierRecord]:
    return sort_by(suppliers, lambda a, b: a.name < b.name)
