"""Table exporters and document serializer (internal)."""

import csv
import io
import re
from pathlib import Path
from typing import Union

from openpyxl import Workbook

from oasmore._internal.canonical_json import canonical_dumps, pretty_dumps
from oasmore.codes import Stage
from oasmore.errors import WriteError
from oasmore.kernel.spec import Specification
from oasmore.kernel.table import ReportTable

# Excel rejects these characters in sheet titles and caps titles at 31 chars
_SHEET_TITLE_INVALID = re.compile(r"[\[\]:*?/\\]")
_SHEET_TITLE_MAX = 31


def sheet_title(name: str) -> str:
    title = _SHEET_TITLE_INVALID.sub(" ", name).strip()[:_SHEET_TITLE_MAX].strip()
    return title or "Sheet1"


def write_table_xlsx(path: Union[str, Path], table: ReportTable) -> Path:
    """Write the table as a single-sheet XLSX workbook."""
    out = Path(path)
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title(table.name)
    ws.append(list(table.columns))
    for row in table.rows:
        ws.append(list(row))
    try:
        wb.save(out)
    except OSError as e:
        raise WriteError(f"could not write {out}: {e}", stage=Stage.EXPORT) from e
    return out


def table_to_csv(table: ReportTable) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(table.columns)
    writer.writerows(table.rows)
    return buf.getvalue()


def write_table_csv(path: Union[str, Path], table: ReportTable) -> Path:
    """Write the table as CSV with a header row."""
    out = Path(path)
    try:
        out.write_text(table_to_csv(table), encoding="utf-8", newline="")
    except OSError as e:
        raise WriteError(f"could not write {out}: {e}", stage=Stage.EXPORT) from e
    return out


def write_table(path: Union[str, Path], table: ReportTable) -> Path:
    """Write the table in the format named by the file suffix (.xlsx or .csv)."""
    out = Path(path)
    suffix = out.suffix.lower()
    if suffix == ".xlsx":
        return write_table_xlsx(out, table)
    if suffix == ".csv":
        return write_table_csv(out, table)
    raise WriteError(f"unsupported table format '{out.suffix}' (use .xlsx or .csv)", stage=Stage.EXPORT)


def dump_spec(spec: Specification, pretty: bool = True) -> str:
    data = spec.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return pretty_dumps(data) if pretty else canonical_dumps(data)


def write_spec_json(path: Union[str, Path], spec: Specification, pretty: bool = True) -> Path:
    """Serialize the document to ``path`` as UTF-8 JSON."""
    out = Path(path)
    try:
        out.write_text(dump_spec(spec, pretty=pretty) + "\n", encoding="utf-8")
    except OSError as e:
        raise WriteError(f"could not write {out}: {e}") from e
    return out
