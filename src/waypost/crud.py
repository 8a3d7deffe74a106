"""Browser-callable CRUD services.

``CrudService`` is the marker protocol a data grid talks to: given a page
request and an optional filter, return one page of items. Only reads are
covered so far.

``ListCrudService`` serves an in-memory list, which is enough for demos
and tests::

    service = ListCrudService([{"name": "Ada"}, {"name": "Grace"}])
    service.list(Pageable(sort=Sort.by("name", Direction.DESC)))
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class Direction(Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True, slots=True)
class Order:
    property: str
    direction: Direction = Direction.ASC


@dataclass(frozen=True, slots=True)
class Sort:
    """Sort orders, most significant first."""

    orders: tuple[Order, ...] = ()

    @classmethod
    def by(cls, property: str, direction: Direction = Direction.ASC) -> "Sort":
        return cls((Order(property, direction),))


@dataclass(frozen=True, slots=True)
class Pageable:
    """A page request: zero-based page number, page size and sort."""

    page_number: int = 0
    page_size: int = 20
    sort: Sort = Sort()

    def __post_init__(self) -> None:
        if self.page_number < 0:
            msg = f"page_number must be >= 0, got {self.page_number}"
            raise ValueError(msg)
        if self.page_size <= 0:
            msg = f"page_size must be > 0, got {self.page_size}"
            raise ValueError(msg)

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


# -- Filters -------------------------------------------------------------------


class Matcher(Enum):
    EQUALS = "EQUALS"
    CONTAINS = "CONTAINS"
    LESS_THAN = "LESS_THAN"
    GREATER_THAN = "GREATER_THAN"


@dataclass(frozen=True, slots=True)
class PropertyStringFilter:
    """Compare one property against a value sent by the grid as a string."""

    property_id: str
    filter_value: str
    matcher: Matcher = Matcher.CONTAINS


@dataclass(frozen=True, slots=True)
class AndFilter:
    children: tuple["Filter", ...] = ()


@dataclass(frozen=True, slots=True)
class OrFilter:
    children: tuple["Filter", ...] = ()


type Filter = PropertyStringFilter | AndFilter | OrFilter


@runtime_checkable
class CrudService[T](Protocol):
    """A browser-callable service that reads a given type of object."""

    def list(self, pageable: Pageable, filter: Filter | None = None) -> list[T]:
        """Return one page of objects, or an empty list if none match."""
        ...


# -- In-memory implementation --------------------------------------------------


def _get(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item[name]
    return getattr(item, name)


def _coerce(value: str, like: Any) -> Any:
    """Convert a filter string to the type of the property it is compared to.

    Raises ``ValueError`` when a numeric property is compared to text that
    is not a number.
    """
    if isinstance(like, bool) or not isinstance(like, int | float):
        return value
    try:
        return type(like)(value)
    except ValueError:
        return float(value)


def _matches(item: Any, flt: Filter) -> bool:
    if isinstance(flt, AndFilter):
        return all(_matches(item, child) for child in flt.children)
    if isinstance(flt, OrFilter):
        return any(_matches(item, child) for child in flt.children)

    actual = _get(item, flt.property_id)
    if flt.matcher is Matcher.CONTAINS:
        return flt.filter_value.lower() in str(actual).lower()
    try:
        expected = _coerce(flt.filter_value, actual)
    except ValueError:
        return False
    if flt.matcher is Matcher.EQUALS:
        return actual == expected
    if flt.matcher is Matcher.LESS_THAN:
        return actual < expected
    return actual > expected


class ListCrudService[T]:
    """``CrudService`` over an in-memory sequence of dicts or objects.

    Items are filtered, sorted by every order (most significant first),
    then sliced to the requested page.
    """

    __slots__ = ("_items", "_on_list")

    def __init__(
        self,
        items: Sequence[T],
        *,
        on_list: Callable[[Pageable, Filter | None], None] | None = None,
    ) -> None:
        self._items = list(items)
        self._on_list = on_list

    def list(self, pageable: Pageable, filter: Filter | None = None) -> list[T]:
        if self._on_list is not None:
            self._on_list(pageable, filter)
        rows = [item for item in self._items if filter is None or _matches(item, filter)]
        # Stable sorts applied least significant first.
        for order in reversed(pageable.sort.orders):
            rows.sort(
                key=lambda item, name=order.property: _get(item, name),
                reverse=order.direction is Direction.DESC,
            )
        return rows[pageable.offset : pageable.offset + pageable.page_size]
