"""Read-only helpers over a parsed Specification."""

import re
from typing import Dict, List, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel

from oasmore.errors import ParseError

from .operation_meta import OperationMeta, operation_metas, operations_count
from .spec import Specification, Tag
from .visitor import iter_operations

_URL_TEMPLATE_VAR = re.compile(r"\{([^{}]*)\}")


class SpecStats(BaseModel):
    operations_count: int
    schemas_count: int


class SpecMore:
    """Derived summaries for a document; ``spec`` may be None (no document)."""

    def __init__(self, spec: Optional[Specification]):
        self.spec = spec

    def schemas_count(self) -> int:
        """Number of schemas; -1 when there is no document."""
        if self.spec is None:
            return -1
        schemas = self.spec.schema_map()
        return len(schemas) if schemas is not None else 0

    def operation_metas(self) -> List[OperationMeta]:
        return operation_metas(self.spec)

    def operations_count(self) -> int:
        return operations_count(self.spec)

    def schema_names(self) -> List[str]:
        """Trimmed, de-duplicated, sorted schema names."""
        if self.spec is None:
            return []
        names = {name.strip() for name in (self.spec.schema_map() or {})}
        names.discard("")
        return sorted(names)

    def schema_name_exists(self, schema_name: str, include_nil: bool = False) -> bool:
        """Whether a schema named ``schema_name`` exists.

        With ``include_nil=False`` an entry counts only if it holds a
        non-empty ``$ref`` or an inline value; with ``include_nil=True``
        any key counts.
        """
        if self.spec is None:
            return False
        schemas = self.spec.schema_map() or {}
        if schema_name not in schemas:
            return False
        if include_nil:
            return True
        schema_ref = schemas[schema_name]
        if schema_ref is None:
            return False
        if schema_ref.ref.strip():
            return True
        return schema_ref.value is not None

    def server_url(self, index: int = 0) -> str:
        """The trimmed URL of server ``index``, or "" if there is none."""
        if self.spec is None or not self.spec.servers:
            return ""
        if index < 0 or index >= len(self.spec.servers):
            return ""
        return self.spec.servers[index].url.strip()

    def server_url_base_path(self, index: int = 0) -> str:
        """Base path of server ``index``'s URL template.

        Template variables such as ``{basePath}`` are kept verbatim.
        """
        server_url = self.server_url(index)
        if not server_url:
            return ""
        variables: List[str] = []

        def _placeholder(match: "re.Match[str]") -> str:
            variables.append(match.group(0))
            return f"oasvar{len(variables) - 1}x"

        masked = _URL_TEMPLATE_VAR.sub(_placeholder, server_url)
        if "{" in masked or "}" in masked:
            raise ParseError(f"unbalanced template braces in server URL '{server_url}'")
        try:
            path = urlsplit(masked).path
        except ValueError as e:
            raise ParseError(f"invalid server URL '{server_url}': {e}") from e
        for i, variable in enumerate(variables):
            path = path.replace(f"oasvar{i}x", variable)
        return path

    def tags_map(self, incl_top: bool = True, incl_ops: bool = True) -> Dict[str, int]:
        """Occurrence counts of trimmed, non-empty tag names."""
        tags_map: Dict[str, int] = {}
        if self.spec is None:
            return tags_map
        if incl_top:
            for tag in self.spec.tags or []:
                _count_tag(tags_map, tag.name)
        if incl_ops:
            for _, _, op in iter_operations(self.spec):
                for tag_name in op.tags or []:
                    _count_tag(tags_map, tag_name)
        return tags_map

    def tags(self, incl_top: bool = True, incl_ops: bool = True) -> List[str]:
        return sorted(self.tags_map(incl_top, incl_ops))

    def stats(self) -> SpecStats:
        return SpecStats(
            operations_count=self.operations_count(),
            schemas_count=self.schemas_count(),
        )


def _count_tag(tags_map: Dict[str, int], tag_name: str) -> None:
    tag_name = tag_name.strip()
    if tag_name:
        tags_map[tag_name] = tags_map.get(tag_name, 0) + 1


class TagsMore:
    """Lookup over a list of document tags."""

    def __init__(self, tags: Optional[List[Tag]]):
        self.tags = list(tags or [])

    def get(self, tag_name: str) -> Optional[Tag]:
        for tag in self.tags:
            if tag.name == tag_name:
                return tag
        return None
