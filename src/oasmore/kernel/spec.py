"""Pydantic models for OpenAPI 3 and Swagger 2 specification documents.

Only the parts of the grammar oasmore reasons about are modeled as fields.
Everything else is kept as pydantic extras so a document survives a
load -> merge -> write round trip unchanged.
"""

from typing import Annotated, Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_serializer

from oasmore._internal.canonical_json import canonical_dumps

EXTENSION_PREFIX = "x-"


class HasExtensionProperties(BaseModel):
    """Base for document objects that may carry ``x-`` vendor extensions.

    Extensions are the extra (unmodeled) keys starting with ``x-``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @property
    def extensions(self) -> Dict[str, Any]:
        extra = self.model_extra or {}
        return {k: v for k, v in extra.items() if k.startswith(EXTENSION_PREFIX)}

    def get_extension(self, key: str) -> Tuple[Any, bool]:
        """Return ``(value, present)`` for an extension key."""
        extensions = self.extensions
        if key in extensions:
            return extensions[key], True
        return None, False

    def get_extension_string(self, key: str) -> Tuple[str, bool]:
        """Return an extension as a string.

        Strings are returned verbatim; other JSON values are rendered as
        canonical JSON. A missing or null extension yields ``("", False)``.
        """
        value, present = self.get_extension(key)
        if not present or value is None:
            return "", False
        if isinstance(value, str):
            return value, True
        return canonical_dumps(value), True


class Info(HasExtensionProperties):
    title: str = ""
    version: Optional[str] = None


class Server(HasExtensionProperties):
    """A server entry; ``url`` may be a template such as ``https://{host}/v1``."""
    url: str = ""
    description: Optional[str] = None


class Tag(HasExtensionProperties):
    name: str = ""
    description: Optional[str] = None


class Operation(HasExtensionProperties):
    """One HTTP-method handler on one path."""
    operation_id: Optional[str] = Field(None, alias="operationId")
    summary: Optional[str] = None
    tags: Optional[List[str]] = None  # Duplicates allowed, order preserved


class PathItem(HasExtensionProperties):
    """Operations of a single path, at most one per HTTP method."""
    connect: Optional[Operation] = None
    delete: Optional[Operation] = None
    get: Optional[Operation] = None
    head: Optional[Operation] = None
    options: Optional[Operation] = None
    patch: Optional[Operation] = None
    post: Optional[Operation] = None
    put: Optional[Operation] = None
    trace: Optional[Operation] = None


class SchemaRef(BaseModel):
    """A schema entry: a ``$ref`` pointer, an inline value, or neither.

    Documents hold schemas in their JSON shape; see ``from_json``.
    """
    ref: str = ""
    value: Optional[Dict[str, Any]] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "SchemaRef":
        """Build from a JSON schema object.

        ``{"$ref": "..."}`` loads as a reference, any other object loads as an
        inline value (``{}`` is an inline value that is empty). Sibling keys
        next to ``$ref`` are kept in ``value``.
        """
        if "$ref" in data:
            rest = {k: v for k, v in data.items() if k != "$ref"}
            return cls(ref=data["$ref"], value=rest or None)
        return cls(ref="", value=data)

    @model_serializer(mode="plain")
    def to_json_shape(self) -> Any:
        if not self.ref and self.value is None:
            return None
        out = dict(self.value or {})
        if self.ref:
            out = {"$ref": self.ref, **out}
        return out


def _schema_from_json(data: Any) -> Any:
    if isinstance(data, dict):
        return SchemaRef.from_json(data)
    return data


SchemaMap = Dict[str, Annotated[Optional[SchemaRef], BeforeValidator(_schema_from_json)]]


class Components(HasExtensionProperties):
    schemas: Optional[SchemaMap] = None


class Specification(HasExtensionProperties):
    """A parsed OpenAPI 3 or Swagger 2 document.

    OpenAPI 3 keeps schemas under ``components.schemas``; Swagger 2 keeps
    them under ``definitions``. Both are modeled so either can be merged.
    """
    openapi: Optional[str] = None
    swagger: Optional[str] = None
    info: Info = Field(default_factory=Info)
    servers: Optional[List[Server]] = None
    tags: Optional[List[Tag]] = None
    paths: Dict[str, PathItem] = Field(default_factory=dict)
    components: Optional[Components] = None
    definitions: Optional[SchemaMap] = None

    @property
    def title(self) -> str:
        return self.info.title

    def schema_map(self) -> Optional[SchemaMap]:
        """Return the schema map: ``components.schemas``, else ``definitions``."""
        if self.components is not None and self.components.schemas is not None:
            return self.components.schemas
        return self.definitions
