"""Field descriptor tables for struct-like values.

A "struct" is a dataclass instance or a pydantic model. Each struct class is
described once by a tuple of :class:`FieldDescriptor` entries, in declaration
order, carrying the metadata the struct builder needs: the tags that decide the
output key and inclusion, whether the field is embedded, and whether it is
exported (names starting with an underscore are not).
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import logging
import typing
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

RESPONSE_TAG = "response"
COND_TAG = "cond"
EMBED_TAG = "embed"
SKIP = "-"

MISSING: Any = object()


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    declared_type: Any = None
    tags: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    @property
    def exported(self) -> bool:
        return not self.name.startswith("_")

    @property
    def embedded(self) -> bool:
        return bool(self.tags.get(EMBED_TAG))

    @property
    def public_name(self) -> str:
        return self.name.lstrip("_")

    def tag(self, key: str) -> str:
        value = self.tags.get(key)
        return "" if value is None else str(value)

    def conditions(self) -> list[str]:
        """Split the conditional tag on commas; no tag yields a single empty condition."""
        return self.tag(COND_TAG).split(",")


def response_field(
    *,
    response: str | None = None,
    json: str | None = None,
    cond: str | None = None,
    embed: bool = False,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field with response metadata.

    Example::

        @dataclass
        class Account:
            id: int = response_field(response="account_id")
            token: str = response_field(response="-")
            notes: str = response_field(cond="admin,support", default="")
            base: Audit = response_field(embed=True, default_factory=Audit)
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if response is not None:
        metadata[RESPONSE_TAG] = response
    if json is not None:
        metadata["json"] = json
    if cond is not None:
        metadata[COND_TAG] = cond
    if embed:
        metadata[EMBED_TAG] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def is_struct(value: Any) -> bool:
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or isinstance(value, BaseModel)


def describe(value_or_type: Any) -> tuple[FieldDescriptor, ...]:
    cls = value_or_type if isinstance(value_or_type, type) else type(value_or_type)
    return _describe_type(cls)


@functools.lru_cache(maxsize=None)
def _describe_type(cls: type) -> tuple[FieldDescriptor, ...]:
    hints = _type_hints(cls)
    if dataclasses.is_dataclass(cls):
        return tuple(
            FieldDescriptor(
                name=f.name,
                declared_type=hints.get(f.name, f.type),
                tags=MappingProxyType(dict(f.metadata)),
            )
            for f in dataclasses.fields(cls)
        )
    if issubclass(cls, BaseModel):
        return _describe_model(cls, hints)
    return ()


def _describe_model(cls: type[BaseModel], hints: dict[str, Any]) -> tuple[FieldDescriptor, ...]:
    descriptors = []
    for name, info in cls.model_fields.items():
        tags: dict[str, Any] = {}
        if isinstance(info.json_schema_extra, Mapping):
            tags.update(info.json_schema_extra)
        if info.alias:
            tags.setdefault("json", info.alias)
        descriptors.append(FieldDescriptor(name=name, declared_type=info.annotation, tags=MappingProxyType(tags)))
    # Private attributes come after the public fields; pydantic does not keep
    # their position relative to each other.
    for name in cls.__private_attributes__:
        descriptors.append(FieldDescriptor(name=name, declared_type=hints.get(name), tags=MappingProxyType({})))
    return tuple(descriptors)


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except Exception:
        # Forward references that cannot be resolved; fall back to the raw
        # annotations, which disables null substitution for those fields.
        logger.debug(f"Could not resolve type hints for {cls.__qualname__}")
        return {}


def response_tag(descriptor: FieldDescriptor, secondary_tag: str = "json") -> str:
    """Resolve the output key of a field.

    Precedence: the "response" tag if non-empty, then the secondary tag if it is
    non-empty and not "-", then the lower-cased field name. A result of "-"
    means the field is excluded.
    """
    name = descriptor.tag(RESPONSE_TAG)
    if name:
        return name
    name = descriptor.tag(secondary_tag)
    if name and name != SKIP:
        return name
    return descriptor.public_name.lower()


def read_field(instance: Any, descriptor: FieldDescriptor) -> Any:
    """Read a field's value, going through a getter for non-exported fields.

    Returns :data:`MISSING` when a non-exported field has no usable getter.
    """
    if descriptor.exported:
        return getattr(instance, descriptor.name)
    return call_getter(instance, descriptor.public_name)


def call_getter(instance: Any, getter_name: str) -> Any:
    """Read ``getter_name`` from ``instance`` if it is a property or a no-argument method."""
    if not getter_name:
        return MISSING
    attribute = inspect.getattr_static(type(instance), getter_name, MISSING)
    if attribute is MISSING:
        return MISSING
    if isinstance(attribute, property):
        return getattr(instance, getter_name)

    bound = getattr(instance, getter_name)
    if not callable(bound):
        return MISSING
    try:
        signature = inspect.signature(bound)
    except (TypeError, ValueError):
        return MISSING
    if signature.parameters:
        return MISSING
    return bound()
