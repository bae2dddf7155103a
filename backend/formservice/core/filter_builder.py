"""Filter Builder - turns optional filter criteria into one parameterized SELECT.

Invariants:
    - Every user-supplied value is a bound parameter; fragment text only ever
      contains column names, operators and placeholders
    - Placeholders are numbered :p1..:pN in the order criteria are added, and
      params[i] is the value for placeholder :p{i+1} (pairing never desyncs)
    - LIMIT/OFFSET placeholders are always the last two parameters
    - Every SELECT carries a deterministic ORDER BY
    - Pure: no IO, no SQLAlchemy, no global state

Design Decisions:
    - One small frozen dataclass per criterion (Equals, IsTrue, TagOverlap,
      Contains, Flag), each rendering its own fragment: adding a filter never
      touches the builder
    - Helper constructors (equals, tags_overlap, contains, flag) return None for
      absent input; the builder skips None, so callers pass raw query values
      straight through
    - Fragments render per dialect because tag overlap and case-insensitive
      LIKE have no portable SQL spelling (PostgreSQL in production, SQLite in tests)
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Literal, Protocol

from formservice.core.pagination import Page

Dialect = Literal["postgresql", "sqlite"]

_TRUTHY = frozenset({"true", "1", "yes"})


@dataclass(frozen=True)
class BoundValue:
    """A placeholder name paired with its value and the column it filters."""
    name: str
    value: Any
    column: str | None = None


class Criterion(Protocol):
    column: str

    @property
    def binds(self) -> bool: ...

    @property
    def value(self) -> Any: ...

    def render(self, placeholder: str | None, dialect: Dialect) -> str: ...


# ─── Criterion variants ─────────────────────────────────────────

@dataclass(frozen=True)
class Equals:
    """Exact scalar match."""
    column: str
    value: Any
    binds = True

    def render(self, placeholder: str | None, dialect: Dialect) -> str:
        return f"{self.column} = {placeholder}"


@dataclass(frozen=True)
class IsTrue:
    """Literal boolean predicate, e.g. the active-only scope. Binds nothing."""
    column: str
    binds = False

    @property
    def value(self) -> None:
        return None

    def render(self, placeholder: str | None, dialect: Dialect) -> str:
        return f"{self.column} = true"


@dataclass(frozen=True)
class TagOverlap:
    """Stored tag set intersects the supplied set."""
    column: str
    tags: tuple[str, ...]
    binds = True

    @property
    def value(self) -> list[str]:
        return list(self.tags)

    def render(self, placeholder: str | None, dialect: Dialect) -> str:
        if dialect == "sqlite":
            return (
                f"EXISTS (SELECT 1 FROM json_each({self.column}) AS stored "
                f"WHERE stored.value IN (SELECT value FROM json_each({placeholder})))"
            )
        return f"{self.column} && {placeholder}"


@dataclass(frozen=True)
class Contains:
    """Case-insensitive substring match. LIKE wildcards in the needle match literally."""
    column: str
    needle: str
    binds = True

    @property
    def value(self) -> str:
        escaped = (
            self.needle.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        )
        return f"%{escaped}%"

    def render(self, placeholder: str | None, dialect: Dialect) -> str:
        # SQLite LIKE is already case-insensitive for ASCII
        op = "LIKE" if dialect == "sqlite" else "ILIKE"
        return f"{self.column} {op} {placeholder} ESCAPE '\\'"


@dataclass(frozen=True)
class Flag:
    """Boolean match for a tri-state filter that was present in the request."""
    column: str
    value: bool
    binds = True

    def render(self, placeholder: str | None, dialect: Dialect) -> str:
        return f"{self.column} = {placeholder}"


# ─── Constructors for optional input ────────────────────────────

def parse_tags(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """Split a comma-delimited string (or iterable) into unique, non-empty tags."""
    if raw is None:
        return ()
    parts = raw.split(",") if isinstance(raw, str) else raw
    seen: dict[str, None] = {}
    for part in parts:
        tag = str(part).strip()
        if tag:
            seen.setdefault(tag, None)
    return tuple(seen)


def parse_flag(raw: str | bool | None) -> bool | None:
    """Tri-state: None when absent, otherwise True only for an explicit truthy value."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in _TRUTHY


def equals(column: str, value: Any) -> Equals | None:
    if value is None or value == "":
        return None
    return Equals(column, value)


def tags_overlap(column: str, raw: str | Iterable[str] | None) -> TagOverlap | None:
    tags = parse_tags(raw)
    return TagOverlap(column, tags) if tags else None


def contains(column: str, needle: str | None) -> Contains | None:
    if not needle:
        return None
    return Contains(column, needle)


def flag(column: str, raw: str | bool | None) -> Flag | None:
    parsed = parse_flag(raw)
    return None if parsed is None else Flag(column, parsed)


# ─── Builder ────────────────────────────────────────────────────

@dataclass(frozen=True)
class BuiltQuery:
    """Final SQL text and its ordered parameters."""
    sql: str
    params: tuple[BoundValue, ...]

    @property
    def values(self) -> list[Any]:
        return [p.value for p in self.params]


class FilterBuilder:
    """Accumulates predicate fragments and their parameters in lockstep."""

    def __init__(
        self,
        table: str,
        order_by: Iterable[str] = (),
        dialect: Dialect = "postgresql",
    ):
        self._table = table
        self._order_by = tuple(order_by)
        self._dialect = dialect
        self._fragments: list[str] = []
        self._params: list[BoundValue] = []

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    @property
    def params(self) -> tuple[BoundValue, ...]:
        return tuple(self._params)

    def where(self, *criteria: Criterion | None) -> "FilterBuilder":
        """Add criteria in order; None entries (absent filters) are skipped."""
        for criterion in criteria:
            if criterion is None:
                continue
            placeholder = None
            if criterion.binds:
                placeholder = self._bind(criterion.value, criterion.column)
            self._fragments.append(criterion.render(placeholder, self._dialect))
        return self

    def build(self, page: Page | None = None) -> BuiltQuery:
        sql = f"SELECT * FROM {self._table}{self._where_clause()}"
        params = list(self._params)
        if self._order_by:
            sql += " ORDER BY " + ", ".join(self._order_by)
        if page is not None:
            limit = BoundValue(f"p{len(params) + 1}", page.limit)
            offset = BoundValue(f"p{len(params) + 2}", page.offset)
            sql += f" LIMIT :{limit.name} OFFSET :{offset.name}"
            params += [limit, offset]
        return BuiltQuery(sql, tuple(params))

    def build_count(self) -> BuiltQuery:
        sql = f"SELECT COUNT(*) FROM {self._table}{self._where_clause()}"
        return BuiltQuery(sql, tuple(self._params))

    def _bind(self, value: Any, column: str) -> str:
        bound = BoundValue(f"p{len(self._params) + 1}", value, column)
        self._params.append(bound)
        return f":{bound.name}"

    def _where_clause(self) -> str:
        if not self._fragments:
            return ""
        return " WHERE " + " AND ".join(self._fragments)
