"""Specification loading and directory listing (internal)."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from oasmore.errors import NotFoundError, ParseError
from oasmore.kernel.spec import Specification

logger = logging.getLogger(__name__)

JSON_FILE_RX = re.compile(r"(?i)\.json\s*$")


def list_json_files(directory: Union[str, Path]) -> List[Path]:
    """List non-empty regular files named ``*.json`` (case-insensitive).

    The result is sorted by file name; merge order depends on it.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise NotFoundError(f"Directory not found: {directory}")
    entries = [
        entry for entry in directory.iterdir()
        if JSON_FILE_RX.search(entry.name)
        and entry.is_file()
        and entry.stat().st_size > 0
    ]
    return sorted(entries, key=lambda p: p.name)


def _check_structure(spec: Specification, data: Dict[str, Any], path: Optional[Path]) -> None:
    """Minimal structural checks applied when ``validate=True``."""
    if not spec.openapi and not spec.swagger:
        raise ParseError("document declares neither 'openapi' nor 'swagger' version", path)
    if not isinstance(data.get("info"), dict) or not isinstance(data["info"].get("title"), str):
        raise ParseError("document 'info.title' is missing or not a string", path)
    for url in spec.paths:
        if not url.startswith("/"):
            raise ParseError(f"path '{url}' must start with '/'", path)


def load_spec_from_dict(
    data: Any,
    validate: bool = True,
    path: Optional[Path] = None,
) -> Specification:
    """Build a Specification from already-decoded JSON data."""
    if not isinstance(data, dict):
        raise ParseError(f"document root must be a JSON object, got {type(data).__name__}", path)
    try:
        spec = Specification.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"invalid specification: {e}", path) from e
    if validate:
        _check_structure(spec, data, path)
    return spec


def load_spec(path: Union[str, Path], validate: bool = True) -> Specification:
    """Load a specification from a JSON file.

    I/O failures (missing file, permissions) propagate as OSError;
    malformed JSON or a document failing validation raises ParseError.
    """
    spec_path = Path(path)
    logger.debug("Loading %s (validate=%s)", spec_path, validate)
    raw = spec_path.read_bytes()
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"invalid JSON: {e}", spec_path) from e
    return load_spec_from_dict(data, validate=validate, path=spec_path)
