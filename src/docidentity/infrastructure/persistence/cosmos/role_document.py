"""Role <-> document mapping.

Field names map to camelCase document keys unless the field declares a
``document_key`` in its metadata (store-owned system properties such as
``_self`` and ``_etag``).
"""

import dataclasses
import typing
from typing import Any

from docidentity.application.ports import TRole
from docidentity.domain.entities import IdentityRole


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def document_key(field: dataclasses.Field) -> str:
    return field.metadata.get("document_key") or _camel(field.name)


def _dump(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            document_key(f): _dump(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, (list, tuple)):
        return [_dump(v) for v in value]
    if isinstance(value, dict):
        return {k: _dump(v) for k, v in value.items()}
    return value


def _load(hint: Any, value: Any) -> Any:
    if value is None:
        return None
    if dataclasses.is_dataclass(hint) and isinstance(value, dict):
        hints = typing.get_type_hints(hint)
        kwargs = {
            f.name: _load(hints.get(f.name), value[document_key(f)])
            for f in dataclasses.fields(hint)
            if document_key(f) in value
        }
        return hint(**kwargs)
    if typing.get_origin(hint) is list and isinstance(value, list):
        (item_hint,) = typing.get_args(hint) or (None,)
        return [_load(item_hint, v) for v in value]
    return value


def role_to_document(role: IdentityRole, include_store_fields: bool = True) -> dict[str, Any]:
    """Serialize a role. Unset store-owned fields are left out."""
    document: dict[str, Any] = {}
    for f in dataclasses.fields(role):
        value = getattr(role, f.name)
        if f.metadata.get("store_owned") and (value is None or not include_store_fields):
            continue
        document[document_key(f)] = _dump(value)
    return document


def populate_role(role: IdentityRole, document: dict[str, Any]) -> None:
    """Merge document fields onto an existing role in place."""
    hints = typing.get_type_hints(type(role))
    for f in dataclasses.fields(role):
        key = document_key(f)
        if key in document:
            setattr(role, f.name, _load(hints.get(f.name), document[key]))


def role_from_document(role_type: type[TRole], document: dict[str, Any]) -> TRole:
    role = role_type()
    populate_role(role, document)
    return role
