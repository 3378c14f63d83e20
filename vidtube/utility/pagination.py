"""
Pagination helpers shared by every list endpoint.

Query values arrive as raw strings and are parsed leniently: anything that is
not a positive integer, or is past MAX_PAGE, falls back to the default instead
of failing the request. `limit` is capped at MAX_LIMIT.
"""
import math
from dataclasses import dataclass, field

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 50
# keeps the OFFSET inside a 64-bit database integer
MAX_PAGE = 1_000_000_000


def _positive_int(value, default: int, maximum: int | None = None) -> int:
    if value is None:
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        return default
    if number < 1 or (maximum is not None and number > maximum):
        return default
    return number


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def get_pagination_params(page=None, limit=None) -> PageParams:
    return PageParams(
        page=_positive_int(page, DEFAULT_PAGE, MAX_PAGE),
        limit=min(_positive_int(limit, DEFAULT_LIMIT), MAX_LIMIT),
    )


def pagination_meta(params: PageParams, total: int) -> dict:
    total_pages = math.ceil(total / params.limit) if total else 0
    return {
        "page": params.page,
        "limit": params.limit,
        "total": total,
        "totalPages": total_pages,
        "hasNextPage": params.page < total_pages,
        "hasPrevPage": params.page > 1,
    }


@dataclass
class Page:
    params: PageParams
    total: int
    docs: list = field(default_factory=list)

    def meta(self) -> dict:
        return pagination_meta(self.params, self.total)


def paginate_list(items: list, params: PageParams) -> tuple[list, int]:
    """Slice an already materialized, already sorted list."""
    return items[params.skip:params.skip + params.limit], len(items)


SORT_FIELDS = ("createdAt", "views", "title", "duration")


def get_sort_params(sort_by: str | None, sort_type: str | None) -> tuple[str, bool]:
    """Return (field, descending); unknown fields fall back to createdAt."""
    field_name = sort_by if sort_by in SORT_FIELDS else SORT_FIELDS[0]
    return field_name, sort_type != "asc"
