"""Tests for the operations table projector."""

import pytest

from oasmore.errors import MalformedExtensionError
from oasmore.kernel.table import Column, ColumnSet, ReportTable, build_operations_table, op_table_columns_default

from conftest import make_spec, op


def test_ping_default_columns(ping_spec):
    table = build_operations_table(ping_spec)
    assert isinstance(table, ReportTable)
    assert table.name == "Ping API"
    assert table.columns == ["Method", "Path", "OperationID", "Summary", "Tags"]
    assert table.rows == [["GET", "/ping", "ping", "Ping", "health"]]


def test_zero_operations_keeps_header():
    table = build_operations_table(make_spec(title="Empty"))
    assert table.name == "Empty"
    assert table.columns == op_table_columns_default().display_texts()
    assert table.rows == []


def test_tags_joined_with_comma_space():
    spec = make_spec(paths={"/x": {"get": op("x", "X", ["a", "b", "a"])}})
    table = build_operations_table(spec)
    assert table.rows[0][4] == "a, b, a"


def test_missing_fields_are_empty_strings():
    spec = make_spec(paths={"/x": {"get": {"responses": {}}}})
    table = build_operations_table(spec)
    assert table.rows == [["GET", "/x", "", "", ""]]


def test_extension_and_tag_group_columns():
    spec = make_spec(
        paths={
            "/users": {
                "get": op("listUsers", "List users", ["users"], x_api_group="core", x_rate=10),
                "post": op("createUser", "Create user", ["users", "admin"]),
            },
        },
        **{"x-tagGroups": [
            {"name": "Accounts", "tags": ["users"]},
            {"name": "Admin", "tags": ["admin"]},
        ]},
    )
    columns = ColumnSet.parse(["method", "operationId", "x-tag-groups", "x-api-group=API Group", "x-rate"])
    table = build_operations_table(spec, columns)

    assert table.columns == ["Method", "OperationID", "Tag Groups", "API Group", "x-rate"]
    assert table.rows == [
        ["GET", "listUsers", "Accounts", "core", "10"],
        ["POST", "createUser", "Accounts, Admin", "", ""],
    ]
    assert all(len(row) == len(table.columns) for row in table.rows)


def test_rows_follow_visit_order():
    spec = make_spec(paths={
        "/a": {"put": op("putA"), "delete": op("deleteA")},
        "/b": {"get": op("getB")},
    })
    table = build_operations_table(spec, ColumnSet([Column("operationId", "Op")]))
    assert table.rows == [["deleteA"], ["putA"], ["getB"]]


def test_malformed_tag_groups_propagate():
    spec = make_spec(paths={"/x": {"get": op("x")}}, **{"x-tagGroups": "bad"})
    with pytest.raises(MalformedExtensionError):
        build_operations_table(spec)


def test_column_set_parse():
    columns = ColumnSet.parse(["path", "x-app-permission=App Permission", " summary = Short "])
    assert columns.slugs() == ["path", "x-app-permission", "summary"]
    assert columns.display_texts() == ["Path", "App Permission", "Short"]
    with pytest.raises(ValueError):
        ColumnSet.parse(["=Nothing"])
