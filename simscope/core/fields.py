"""
Field description capability for introspected records.

A record can describe itself by implementing ``describe_fields()`` and
returning ``FieldDescriptor`` objects in display order. Dataclasses get
this for free through :func:`describe_dataclass`. NamedTuples use their
fields; other objects fall back to their public instance attributes,
slots included.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List

MAX_DEPTH = 6
ELLIPSIS = "{...}"


@dataclass(frozen=True)
class FieldDescriptor:
    """One public field of a record, valid for a single render pass."""

    name: str
    type_label: str
    value: Any
    nested: bool = False

    def render_value(self, hide_names: bool = False) -> str:
        return format_value(self.value, hide_names)


def is_public(name: str) -> bool:
    return not name.startswith("_")


def type_name(obj: Any) -> str:
    return type(obj).__name__


def annotation_label(annotation: Any, value: Any) -> str:
    """Readable label for a declared field type."""
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        return annotation.__name__
    if annotation is None or annotation is dataclasses.MISSING:
        return type_name(value)
    return str(annotation).replace("typing.", "")


def _is_record(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def format_value(value: Any, hide_names: bool = False) -> str:
    """Render a value; nested records as ``{A:1 B:2}`` or ``{1 2}``.

    Records and containers already on the current path, or nested deeper
    than ``MAX_DEPTH``, render as ``{...}``.
    """
    return _format(value, hide_names, frozenset(), 0)


def _format(value: Any, hide_names: bool, seen: FrozenSet[int], depth: int) -> str:
    is_record = _is_record(value)
    if not is_record and not isinstance(value, (list, tuple, dict)):
        return str(value)
    if id(value) in seen or depth >= MAX_DEPTH:
        return ELLIPSIS
    seen = seen | {id(value)}
    depth += 1

    if is_record:
        parts = []
        for f in dataclasses.fields(value):
            if not is_public(f.name):
                continue
            inner = _format(getattr(value, f.name), hide_names, seen, depth)
            parts.append(inner if hide_names else f"{f.name}:{inner}")
        return "{" + " ".join(parts) + "}"
    if isinstance(value, dict):
        items = (f"{k}:{_format(v, hide_names, seen, depth)}" for k, v in value.items())
        return "map[" + " ".join(items) + "]"
    return "[" + " ".join(_format(v, hide_names, seen, depth) for v in value) + "]"


def describe_dataclass(record: Any) -> List[FieldDescriptor]:
    """Public fields of a dataclass instance in declaration order."""
    result = []
    for f in dataclasses.fields(record):
        if not is_public(f.name):
            continue
        value = getattr(record, f.name)
        result.append(FieldDescriptor(
            name=f.name,
            type_label=annotation_label(f.type, value),
            value=value,
            nested=_is_record(value),
        ))
    return result


def instance_attributes(record: Any) -> Dict[str, Any]:
    """Attributes of a plain object: NamedTuple fields, slots, then ``vars()``."""
    if isinstance(record, tuple) and hasattr(record, "_asdict"):
        return dict(record._asdict())

    attrs = {}
    for cls in reversed(type(record).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or not hasattr(record, name):
                continue
            attrs[name] = getattr(record, name)
    if hasattr(record, "__dict__"):
        attrs.update(vars(record))
    return attrs


def describe_fields(record: Any) -> List[FieldDescriptor]:
    """Ordered field descriptors for any record."""
    describe = getattr(record, "describe_fields", None)
    if callable(describe):
        return list(describe())
    if _is_record(record):
        return describe_dataclass(record)
    return [
        FieldDescriptor(name, type_name(value), value, _is_record(value))
        for name, value in instance_attributes(record).items()
        if is_public(name)
    ]
