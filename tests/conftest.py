"""Pytest configuration and shared document builders.

No sys.path hacks - tests import from the installed oasmore package.
"""

from pathlib import Path

import pytest

from oasmore.kernel.spec import Specification

HERE = Path(__file__).resolve().parent
FIXTURES = HERE.parent / "fixtures"


def make_spec(paths=None, tags=None, schemas=None, title="Test API", **extra) -> Specification:
    """Build a minimal OpenAPI 3 document from plain dicts."""
    data = {
        "openapi": "3.0.3",
        "info": {"title": title, "version": "1.0.0"},
        "paths": paths or {},
    }
    if tags is not None:
        data["tags"] = [{"name": t} if isinstance(t, str) else t for t in tags]
    if schemas is not None:
        data["components"] = {"schemas": schemas}
    data.update(extra)
    return Specification.model_validate(data)


def op(operation_id, summary="", tags=None, **extensions) -> dict:
    """Build an operation dict; ``x_foo=...`` keywords become ``x-foo`` extensions."""
    data = {"operationId": operation_id, "summary": summary, "responses": {"200": {"description": "OK"}}}
    if tags is not None:
        data["tags"] = list(tags)
    for key, value in extensions.items():
        data[key.replace("_", "-")] = value
    return data


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def petstore_path() -> Path:
    return FIXTURES / "petstore.json"


@pytest.fixture
def ping_spec() -> Specification:
    return make_spec(
        title="Ping API",
        paths={"/ping": {"get": op("ping", "Ping", ["health"])}},
    )

