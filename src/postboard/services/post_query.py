"""Query builder for post listings.

Learn: Listing parameters arrive as loosely-typed query-string text.
PostQuery.from_params() parses and clamps them once, at the boundary;
build_post_select() only ever sees validated integers and plain strings.

Filters go through SQLAlchemy's icontains(), which binds the fragment as
a parameter, so user text is never spliced into SQL. autoescape=True makes
"%" and "_" in a search term match literally, so a filter is a true
substring match.
"""

from dataclasses import dataclass
from typing import Optional, Union

from sqlalchemy import Select, and_, select

from postboard.db.models import Post

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# Largest value a signed 64-bit INTEGER column or LIMIT/OFFSET accepts.
MAX_SQL_INT = 2**63 - 1

RawParam = Union[str, int, None]


def parse_positive_int(raw: RawParam, default: int) -> int:
    """Parse a query-string integer, falling back to default.

    Non-numeric text yields the default; zero or negative values clamp to 1,
    values beyond the SQL integer range clamp to MAX_SQL_INT.
    """
    if raw is None:
        return default
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return min(max(value, 1), MAX_SQL_INT)


def parse_row_id(raw: RawParam) -> Optional[int]:
    """Parse a row id from a URL or body, or None if no row could have it.

    Ids are positive and fit in a signed 64-bit integer. Anything else
    (non-numeric text, zero, negatives, oversized numbers) cannot match a
    stored row, so callers treat None as "not found".
    """
    if raw is None:
        return None
    try:
        value = int(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        return None
    if not 1 <= value <= MAX_SQL_INT:
        return None
    return value


@dataclass
class PostQuery:
    """One page of a filtered post listing. Page numbers start at 1."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: Optional[str] = None
    tag: Optional[str] = None

    def __post_init__(self):
        self.limit = min(max(self.limit, 1), MAX_SQL_INT)
        # Keep (page - 1) * limit within range as well.
        self.page = min(max(self.page, 1), MAX_SQL_INT // self.limit + 1)
        # Empty filters impose no constraint.
        self.search = self.search or None
        self.tag = self.tag or None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_params(
        cls,
        page: RawParam = None,
        limit: RawParam = None,
        search: Optional[str] = None,
        tag: Optional[str] = None,
        default_limit: int = DEFAULT_LIMIT,
    ) -> "PostQuery":
        return cls(
            page=parse_positive_int(page, DEFAULT_PAGE),
            limit=parse_positive_int(limit, default_limit),
            search=search,
            tag=tag,
        )


def build_post_select(query: PostQuery) -> Select:
    """SELECT for one page of posts, filters ANDed, in insertion (id) order."""
    conditions = []
    if query.search:
        conditions.append(Post.title.icontains(query.search, autoescape=True))
    if query.tag:
        conditions.append(Post.tags.icontains(query.tag, autoescape=True))

    stmt = select(Post)
    if conditions:
        stmt = stmt.where(and_(*conditions))
    return stmt.order_by(Post.id).limit(query.limit).offset(query.offset)
