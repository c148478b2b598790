"""Merge engine: fold several specification documents into one.

Conflict policy:
- tags: append-if-new by trimmed name; tags already on the master win
- paths: the extra document's PathItem replaces the master's wholesale
- schemas/definitions: the extra document's entry replaces the master's wholesale

Path and schema replacement makes merge non-commutative, so directory
folds always run in sorted file-name order.
"""

import logging
from pathlib import Path
from typing import Callable, Union

from oasmore._internal.io.loader import list_json_files, load_spec
from oasmore.errors import NotFoundError

from .spec import Components, Specification

logger = logging.getLogger(__name__)

SpecLoader = Callable[[Path, bool], Specification]


def merge_tags(spec_master: Specification, spec_extra: Specification) -> Specification:
    """Append the extra document's tags whose trimmed name is new to the master."""
    if not spec_extra.tags:
        return spec_master
    if spec_master.tags is None:
        spec_master.tags = []
    seen = {tag.name.strip() for tag in spec_master.tags}
    for tag in spec_extra.tags:
        name = tag.name.strip()
        if name in seen:
            continue
        seen.add(name)
        spec_master.tags.append(tag.model_copy(update={"name": name}, deep=True))
    return spec_master


def merge_paths(spec_master: Specification, spec_extra: Specification) -> Specification:
    """Copy the extra document's paths over the master, replacing whole PathItems."""
    if not spec_extra.paths:
        return spec_master
    paths = dict(spec_master.paths)
    for url, path_item in spec_extra.paths.items():
        if url in paths:
            logger.debug("Path %s replaced by later document", url)
        paths[url] = path_item.model_copy(deep=True)
    # Assignment marks paths as set for exclude_unset dumps
    spec_master.paths = paths
    return spec_master


def merge_definitions(spec_master: Specification, spec_extra: Specification) -> Specification:
    """Copy the extra document's schemas over the master, replacing whole entries.

    Applies to both OpenAPI 3 ``components.schemas`` and Swagger 2 ``definitions``.
    """
    extra_schemas = spec_extra.components.schemas if spec_extra.components else None
    if extra_schemas:
        if spec_master.components is None:
            spec_master.components = Components()
        if spec_master.components.schemas is None:
            spec_master.components.schemas = {}
        for name, schema_ref in extra_schemas.items():
            spec_master.components.schemas[name] = (
                schema_ref.model_copy(deep=True) if schema_ref is not None else None
            )

    if spec_extra.definitions:
        if spec_master.definitions is None:
            spec_master.definitions = {}
        for name, schema_ref in spec_extra.definitions.items():
            spec_master.definitions[name] = (
                schema_ref.model_copy(deep=True) if schema_ref is not None else None
            )
    return spec_master


def merge(spec_master: Specification, spec_extra: Specification) -> Specification:
    """Merge ``spec_extra`` into a copy of ``spec_master`` and return the copy.

    Neither input is modified. ``merge(a, b)`` and ``merge(b, a)`` generally differ.
    """
    merged = spec_master.model_copy(deep=True)
    merged = merge_tags(merged, spec_extra)
    merged = merge_paths(merged, spec_extra)
    return merge_definitions(merged, spec_extra)


def merge_directory(
    directory: Union[str, Path],
    validate: bool = True,
    loader: SpecLoader = load_spec,
) -> Specification:
    """Fold every ``*.json`` file in ``directory`` into one document.

    Files are folded in lexicographic file-name order; the first file is
    the seed master. The first file that fails to load aborts the fold and
    its ParseError propagates; later files are never read.

    Raises:
        NotFoundError: the directory is missing or has no non-empty JSON files
        ParseError: a file failed to parse or validate
    """
    directory = Path(directory)
    spec_files = list_json_files(directory)
    if not spec_files:
        raise NotFoundError(f"No JSON files found in directory [{directory}]")

    spec_master = None
    for spec_file in spec_files:
        this_spec = loader(spec_file, validate)
        if spec_master is None:
            spec_master = this_spec
        else:
            logger.debug("Merging %s", spec_file.name)
            spec_master = merge(spec_master, this_spec)

    logger.info(
        "Merged %d file(s) from %s: %d path(s), %d schema(s)",
        len(spec_files),
        directory,
        len(spec_master.paths),
        len(spec_master.schema_map() or {}),
    )
    return spec_master
