"""Operation visitor: walks every (path, method, operation) of a document."""

from enum import Enum
from typing import Callable, Iterator, Optional, Tuple

from .spec import Operation, PathItem, Specification


class HttpMethod(str, Enum):
    """HTTP methods an OpenAPI path item can hold, in visiting order."""

    CONNECT = "CONNECT"
    DELETE = "DELETE"
    GET = "GET"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"
    TRACE = "TRACE"

    @property
    def attr(self) -> str:
        """PathItem attribute holding this method's operation."""
        return self.value.lower()

    def operation(self, path_item: PathItem) -> Optional[Operation]:
        return getattr(path_item, self.attr)


OperationVisitor = Callable[[str, str, Operation], None]


def iter_operations(spec: Optional[Specification]) -> Iterator[Tuple[str, str, Operation]]:
    """Yield ``(path, method, operation)`` for every present method slot.

    Paths come in document order; methods within a path follow HttpMethod.
    """
    if spec is None:
        return
    for url, path_item in spec.paths.items():
        for method in HttpMethod:
            op = method.operation(path_item)
            if op is not None:
                yield url, method.value, op


def visit_operations(spec: Optional[Specification], fn: OperationVisitor) -> None:
    """Call ``fn(path, method, op)`` once per operation in the document."""
    for url, method, op in iter_operations(spec):
        fn(url, method, op)
