"""oasmore: inspect, tabulate and merge OpenAPI / Swagger documents."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("oasmore")
except PackageNotFoundError:
    __version__ = "dev"

from oasmore.codes import ErrorCode, Stage
from oasmore.errors import (
    MalformedExtensionError,
    NotFoundError,
    OasMoreError,
    ParseError,
    StageError,
    WriteError,
)
from oasmore.kernel.spec import Operation, PathItem, SchemaRef, Specification, Tag
from oasmore.kernel.table import Column, ColumnSet, ReportTable
from oasmore.kernel.spec_more import SpecMore, SpecStats

__all__ = [
    "__version__",
    "ErrorCode",
    "Stage",
    "OasMoreError",
    "NotFoundError",
    "ParseError",
    "MalformedExtensionError",
    "StageError",
    "WriteError",
    "Specification",
    "PathItem",
    "Operation",
    "SchemaRef",
    "Tag",
    "Column",
    "ColumnSet",
    "ReportTable",
    "SpecMore",
    "SpecStats",
]
