"""
Tests for JSON Patch application on the patchable customer shape
"""

from sales_api.v1_0.helper.patching import apply_patch_document

SHAPE = {"name": "Acme", "tax_id": None, "email": None, "phone": None, "address": None, "city": "Cali"}


def test_replace_and_add():
    patched, errors = apply_patch_document(
        SHAPE,
        [
            {"op": "replace", "path": "/name", "value": "Acme Corp"},
            {"op": "add", "path": "/phone", "value": "555-0100"},
        ],
    )

    assert errors == {}
    assert patched["name"] == "Acme Corp"
    assert patched["phone"] == "555-0100"
    assert SHAPE["name"] == "Acme"


def test_remove_drops_key():
    patched, errors = apply_patch_document(SHAPE, [{"op": "remove", "path": "/city"}])

    assert errors == {}
    assert "city" not in patched


def test_failing_operation_keyed_by_path_and_shape_kept():
    patched, errors = apply_patch_document(
        SHAPE,
        [
            {"op": "replace", "path": "/name", "value": "Changed"},
            {"op": "replace", "path": "/balance", "value": 10},
        ],
    )

    assert list(errors) == ["balance"]
    assert patched is SHAPE


def test_failed_test_operation():
    _, errors = apply_patch_document(SHAPE, [{"op": "test", "path": "/name", "value": "Other"}])

    assert "name" in errors


def test_unknown_operation():
    _, errors = apply_patch_document(SHAPE, [{"op": "frobnicate", "path": "/name"}])

    assert "name" in errors


def test_missing_path():
    _, errors = apply_patch_document(SHAPE, [{"op": "replace", "value": "x"}])

    assert "patch" in errors


def test_document_must_be_list_of_objects():
    for document in ({"op": "replace"}, "nope", [1, 2]):
        patched, errors = apply_patch_document(SHAPE, document)
        assert patched is SHAPE
        assert "patch" in errors


def test_empty_document_is_noop():
    patched, errors = apply_patch_document(SHAPE, [])

    assert errors == {}
    assert patched == SHAPE
