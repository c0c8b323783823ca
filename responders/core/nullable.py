"""Support for database-style nullable wrapper types.

Nullable scalars loaded from a database are commonly modeled as a value plus a
validity flag::

    @dataclass
    class NullInt:
        Int: int = 0
        Valid: bool = False

Any struct whose type name starts with the nullable prefix and carries both the
value field (the type name without the prefix) and ``Valid`` is rendered as the
bare value when valid, or ``None`` otherwise.
"""

from __future__ import annotations

from typing import Any

from .config import DEFAULT_NULLABLE_PREFIX
from .exceptions import NullableMismatch
from .fields import FieldDescriptor, describe

VALID_FIELD = "Valid"


def unwrap_nullable(value: Any, prefix: str = DEFAULT_NULLABLE_PREFIX) -> Any:
    """Return the wrapped value, or ``None`` when it is not valid.

    Raises:
        NullableMismatch: if ``value`` does not follow the convention.
    """
    type_name = type(value).__name__
    if not prefix or not type_name.startswith(prefix):
        raise NullableMismatch(f"{type_name} does not start with {prefix!r}")

    descriptors = describe(value)
    value_field = _find_field(descriptors, type_name[len(prefix) :])
    valid_field = _find_field(descriptors, VALID_FIELD)
    if value_field is None or valid_field is None:
        raise NullableMismatch(f"No nullable value found on {type_name}")

    if getattr(value, valid_field.name):
        return getattr(value, value_field.name)
    return None


def _find_field(descriptors: tuple[FieldDescriptor, ...], name: str) -> FieldDescriptor | None:
    if not name:
        return None
    for descriptor in descriptors:
        if descriptor.name == name:
            return descriptor
    lowered = name.lower()
    for descriptor in descriptors:
        if descriptor.name.lower() == lowered:
            return descriptor
    return None
