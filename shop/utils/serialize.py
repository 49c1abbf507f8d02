# shop/utils/serialize.py
"""
Turning ORM rows into plain dicts keyed by wire (column) names, and the
matching eager-load options.

``include`` mirrors the shape of the response: a relationship name maps to
``True`` (all columns), a nested include dict, or a tuple of field names to
project.
"""
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.properties import ColumnProperty


def column_fields(model) -> Dict[str, ColumnProperty]:
    """Wire name and attribute key of every column, both mapped to the property."""
    fields: Dict[str, ColumnProperty] = {}
    for prop in sa_inspect(model).column_attrs:
        fields[prop.columns[0].name] = prop
        fields[prop.key] = prop
    return fields


def to_dict(
    obj: Any,
    include: Optional[Dict[str, Any]] = None,
    only: Optional[Iterable[str]] = None,
    hidden: Iterable[str] = (),
) -> Optional[Dict[str, Any]]:
    if obj is None:
        return None

    only = set(only) if only is not None else None
    hidden = set(hidden)
    data: Dict[str, Any] = {}

    for prop in sa_inspect(obj).mapper.column_attrs:
        name = prop.columns[0].name
        if only is not None and name not in only:
            continue
        if name in hidden:
            continue
        data[name] = getattr(obj, prop.key)

    for rel, shape in (include or {}).items():
        if isinstance(shape, dict):
            kwargs = {"include": shape}
        elif isinstance(shape, (tuple, list, set, frozenset)):
            kwargs = {"only": shape}
        else:
            kwargs = {}

        value = getattr(obj, rel)
        if isinstance(value, list):
            data[rel] = [to_dict(v, **kwargs) for v in value]
        else:
            data[rel] = to_dict(value, **kwargs)

    return data


def loader_options(model, include: Optional[Dict[str, Any]]) -> List:
    options = []
    for rel, shape in (include or {}).items():
        attr = getattr(model, rel)
        loader = selectinload(attr)
        if isinstance(shape, dict):
            target = attr.property.mapper.class_
            loader = loader.options(*loader_options(target, shape))
        options.append(loader)
    return options
