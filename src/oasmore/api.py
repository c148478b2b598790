"""Public API for oasmore.

High-level functions that accept paths, dicts or parsed documents and
return complete, structured results. Prefer these over importing from
``oasmore._internal``.
"""

import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from oasmore._internal.io.export import write_spec_json, write_table
from oasmore._internal.io.loader import load_spec, load_spec_from_dict
from oasmore.codes import Stage
from oasmore.errors import OasMoreError, StageError, WriteError
from oasmore.kernel import merge as _merge
from oasmore.kernel.spec import Specification
from oasmore.kernel.spec_more import SpecMore, SpecStats
from oasmore.kernel.table import ColumnSet, ReportTable, build_operations_table
from oasmore.kernel.tag_groups import TagGroupSet
from oasmore.kernel.tag_groups import tag_groups as _tag_groups

SpecInput = Union[str, os.PathLike, Path, Dict[str, Any], Specification]
ColumnsInput = Union[ColumnSet, Iterable[str], None]


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def load(spec: SpecInput, validate: bool = True) -> Specification:
    """Load a document from a path or dict; Specifications pass through."""
    if isinstance(spec, Specification):
        return spec
    if isinstance(spec, dict):
        return load_spec_from_dict(spec, validate=validate)
    return load_spec(_normalize_path(spec), validate=validate)


def _columns(columns: ColumnsInput) -> Optional[ColumnSet]:
    if columns is None or isinstance(columns, ColumnSet):
        return columns
    return ColumnSet.parse(columns)


def merge(spec_master: SpecInput, spec_extra: SpecInput, validate: bool = True) -> Specification:
    """Merge two documents; see oasmore.kernel.merge for the conflict policy."""
    return _merge.merge(load(spec_master, validate), load(spec_extra, validate))


def merge_directory(directory: Union[str, os.PathLike, Path], validate: bool = True) -> Specification:
    """Fold all ``*.json`` files of a directory, in file-name order."""
    return _merge.merge_directory(_normalize_path(directory), validate=validate)


def write_file_dir_merge(
    outfile: Union[str, os.PathLike, Path],
    input_dir: Union[str, os.PathLike, Path],
    pretty: bool = True,
    validate: bool = True,
) -> Path:
    """Merge a directory and write the result as JSON.

    Raises:
        StageError: stage ``merge``; the directory fold failed
        WriteError: stage ``write``; serializing or writing failed
    """
    try:
        spec = merge_directory(input_dir, validate=validate)
    except (OasMoreError, OSError) as e:
        raise StageError(Stage.MERGE, str(e)) from e

    try:
        return write_spec_json(_normalize_path(outfile), spec, pretty=pretty)
    except WriteError:
        raise
    except (TypeError, ValueError) as e:
        raise WriteError(f"could not serialize merged document: {e}") from e


def operations_table(spec: SpecInput, columns: ColumnsInput = None, validate: bool = True) -> ReportTable:
    """Project a document's operations into a ReportTable."""
    return build_operations_table(load(spec, validate), _columns(columns))


def write_operations_table(
    outfile: Union[str, os.PathLike, Path],
    spec: SpecInput,
    columns: ColumnsInput = None,
    validate: bool = True,
) -> Path:
    """Write the operations table as .xlsx or .csv (chosen by suffix)."""
    table = operations_table(spec, columns, validate)
    return write_table(_normalize_path(outfile), table)


def stats(spec: SpecInput, validate: bool = True) -> SpecStats:
    return SpecMore(load(spec, validate)).stats()


def tags(spec: SpecInput, incl_top: bool = True, incl_ops: bool = True, validate: bool = True) -> List[str]:
    """Sorted, trimmed tag names from top-level tags and/or operations."""
    return SpecMore(load(spec, validate)).tags(incl_top, incl_ops)


def tag_groups(spec: SpecInput, validate: bool = True) -> TagGroupSet:
    return _tag_groups(load(spec, validate))
