"""Flat, serializable summaries of operations."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .spec import Operation, Specification
from .visitor import iter_operations


class OperationMeta(BaseModel):
    """Summary of one operation and its path/method context."""
    path: str
    method: str
    operation_id: str = Field("", alias="operationId")
    summary: str = ""
    tags: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


def operation_to_meta(path: str, method: str, op: Operation) -> OperationMeta:
    return OperationMeta(
        path=path,
        method=method,
        operation_id=op.operation_id or "",
        summary=op.summary or "",
        tags=list(op.tags or []),
    )


def operation_metas(spec: Optional[Specification]) -> List[OperationMeta]:
    """Return one OperationMeta per operation, in visiting order."""
    return [operation_to_meta(url, method, op) for url, method, op in iter_operations(spec)]


def operations_count(spec: Optional[Specification]) -> int:
    """Count operations; -1 signals that there is no document at all."""
    if spec is None:
        return -1
    return sum(1 for _ in iter_operations(spec))
