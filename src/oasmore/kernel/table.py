"""Tabular projection of a document's operations for reporting/export."""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from .spec import Operation, Specification
from .tag_groups import TagGroupSet, tag_groups
from .visitor import iter_operations

TAG_SEPARATOR = ", "
TAG_GROUPS_COLUMN = "x-tag-groups"


@dataclass(frozen=True)
class Column:
    """A table column: ``slug`` selects the value, ``display`` is the header."""
    slug: str
    display: str


class ColumnSet:
    """Ordered list of columns."""

    def __init__(self, columns: Iterable[Column]):
        self.columns: List[Column] = list(columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self):
        return iter(self.columns)

    def display_texts(self) -> List[str]:
        return [c.display for c in self.columns]

    def slugs(self) -> List[str]:
        return [c.slug for c in self.columns]

    @classmethod
    def parse(cls, specs: Iterable[str]) -> "ColumnSet":
        """Build columns from ``"slug"`` or ``"slug=Display"`` strings."""
        columns = []
        for spec in specs:
            slug, sep, display = spec.partition("=")
            slug = slug.strip()
            if not slug:
                raise ValueError(f"Column '{spec}' has an empty slug")
            display = display.strip() if sep else ""
            columns.append(Column(slug=slug, display=display or _DEFAULT_DISPLAY.get(slug, slug)))
        return cls(columns)


def op_table_columns_default() -> ColumnSet:
    return ColumnSet([
        Column(slug="method", display="Method"),
        Column(slug="path", display="Path"),
        Column(slug="operationId", display="OperationID"),
        Column(slug="summary", display="Summary"),
        Column(slug="tags", display="Tags"),
    ])


_DEFAULT_DISPLAY: Dict[str, str] = {c.slug: c.display for c in op_table_columns_default()}
_DEFAULT_DISPLAY[TAG_GROUPS_COLUMN] = "Tag Groups"


class ReportTable(BaseModel):
    """Generic rows/columns table; every row is aligned to ``columns``."""
    name: str = ""
    columns: List[str] = Field(default_factory=list)
    rows: List[List[str]] = Field(default_factory=list)


CellResolver = Callable[[str, str, Operation, TagGroupSet], str]

_BUILTIN_RESOLVERS: Dict[str, CellResolver] = {
    "method": lambda path, method, op, tgs: method,
    "path": lambda path, method, op, tgs: path,
    "operationId": lambda path, method, op, tgs: op.operation_id or "",
    "summary": lambda path, method, op, tgs: op.summary or "",
    "tags": lambda path, method, op, tgs: TAG_SEPARATOR.join(op.tags or []),
    TAG_GROUPS_COLUMN: lambda path, method, op, tgs: TAG_SEPARATOR.join(
        tgs.get_tag_group_names_for_tag_names(*(op.tags or []))
    ),
}


def _resolve_cell(slug: str, path: str, method: str, op: Operation, tgs: TagGroupSet) -> str:
    resolver = _BUILTIN_RESOLVERS.get(slug)
    if resolver is not None:
        return resolver(path, method, op, tgs)
    # Missing extension fields are common and yield an empty cell
    value, _ = op.get_extension_string(slug)
    return value


def build_operations_table(
    spec: Specification,
    columns: Optional[ColumnSet] = None,
) -> ReportTable:
    """Project the document's operations into a ReportTable.

    One row per operation, in visitor order. Raises MalformedExtensionError
    if the document's ``x-tagGroups`` extension is malformed.
    """
    if columns is None:
        columns = op_table_columns_default()
    tgs = tag_groups(spec)
    slugs = columns.slugs()

    table = ReportTable(name=spec.title, columns=columns.display_texts())
    for path, method, op in iter_operations(spec):
        table.rows.append([_resolve_cell(slug, path, method, op, tgs) for slug in slugs])
    return table
