from typing import Any, Dict, Tuple

import jsonpatch
import jsonpointer

from sales_api.v1_0.schemas import ValidationErrors


def _op_key(op: Any) -> str:
    if isinstance(op, dict) and isinstance(op.get("path"), str) and op["path"]:
        return op["path"].lstrip("/") or "patch"
    return "patch"


def apply_patch_document(
    shape: Dict[str, Any],
    document: Any,
) -> Tuple[Dict[str, Any], ValidationErrors]:
    """
    Apply an RFC 6902 patch document to a copy of ``shape``.

    The input is never modified. On failure the original shape is returned
    together with errors keyed by the failing operation's path.
    """
    if not isinstance(document, list) or not all(isinstance(op, dict) for op in document):
        return shape, {"patch": ["Patch document must be a list of operation objects."]}

    errors: ValidationErrors = {}
    patched = dict(shape)
    for op in document:
        if not isinstance(op.get("path"), str):
            errors.setdefault("patch", []).append("Operation must have a string 'path' member.")
            continue
        try:
            patched = jsonpatch.JsonPatch([op]).apply(patched)
        except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as e:
            errors.setdefault(_op_key(op), []).append(str(e))

    if errors:
        return shape, errors
    return patched, {}
