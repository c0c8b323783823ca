"""Conversion of arbitrary response data into a generic output tree."""

from __future__ import annotations

import enum
import logging
import types
import typing
import weakref
from collections.abc import Mapping, Set
from typing import Any

from opentelemetry import trace
from pydantic import BaseModel

from .config import get_config
from .exceptions import NullableMismatch
from .fields import MISSING, FieldDescriptor, describe, is_struct, read_field, response_tag
from .nullable import unwrap_nullable
from .types import (
    CollectionResponseConverter,
    Constructor,
    Fixer,
    InclusionPredicate,
    LazyLoader,
    Options,
    ResponseConverter,
    ResponseElementConverter,
    nil_element_data,
    provides,
    provides_nil_element_data,
)

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

_NOT_COMPUTED: Any = object()

# Types whose str() is not treated as a string rendering of the value.
_PLAIN_TYPES = (
    str,
    bytes,
    bytearray,
    int,
    float,
    complex,
    bool,
    type(None),
    list,
    tuple,
    Set,
    Mapping,
    weakref.ref,
    type,
)

# pydantic models get a generated __str__; only a user-defined one counts.
_DEFAULT_STR_METHODS = (object.__str__, BaseModel.__str__)


class Response:
    """Stores response data and generates its output structure.

    Struct values (dataclasses and pydantic models) become dicts. Each exported
    field's key is the first non-empty result of:

    1. The ``response`` tag of the field.
    2. The ``json`` tag of the field, if it is not ``"-"``.
    3. The lower-cased field name.

    A key of ``"-"`` skips the field. Fields whose names start with an
    underscore are read through a getter named without the underscores, and
    skipped if there is none.

    Values implementing :class:`~responders.core.types.LazyLoader` are loaded
    first, with ``options`` as the argument. Data can be converted along the way
    by implementing ``ResponseConverter``, ``ResponseElementConverter``,
    ``NilElementConverter`` or ``CollectionResponseConverter``.

    Args:
        data: The value to convert.
        constructor: Called with (value, depth) before each value is converted.
            Returns (output, descend); when descend is False the output is
            used as-is.
        fixer: Called with the fully converted structure at each level,
            deepest first, and returns the structure to use instead.
        options: Passed read-only to ``lazy_load`` and ``response_element_data``.
        should_include: Decides whether a field with a ``cond`` tag is included.
            Defaults to the configured process-wide predicate.
    """

    def __init__(
        self,
        data: Any,
        constructor: Constructor | None = None,
        fixer: Fixer | None = None,
        options: Options | None = None,
        should_include: InclusionPredicate | None = None,
    ) -> None:
        config = get_config()
        self.data = data
        self.constructor = constructor
        self.fixer = fixer
        self.options: Options = types.MappingProxyType(dict(options or {}))
        self.should_include: InclusionPredicate = should_include or config.should_include
        self.nullable_prefix = config.nullable_prefix
        self.secondary_tag = config.secondary_tag

        self._output: Any = _NOT_COMPUTED

    def output(self) -> Any:
        """Return the output structure, generating it on the first call."""
        if self._output is _NOT_COMPUTED:
            self._output = self._create_output()
        return self._output

    def _create_output(self) -> Any:
        if isinstance(self.data, BaseException):
            return str(self.data)

        with tracer.start_as_current_span("responders.output") as span:
            span.set_attribute("responders.data_type", type(self.data).__qualname__)
            logger.debug(f"Creating response output for {type(self.data).__qualname__}")
            return self._create_response(self.data, 0)

    def _create_response(self, data: Any, depth: int) -> Any:
        if provides(data, LazyLoader):
            data.lazy_load(self.options)

        response_data = data
        if self.constructor is not None:
            response_data, descend = self.constructor(response_data, depth)
            if not descend:
                return response_data

        if provides(data, ResponseConverter):
            response_data = data.response_data()

        if _renders_as_string(response_data):
            response_data = str(response_data)
        elif isinstance(response_data, BaseException):
            response_data = str(response_data)

        response_data = _dereference(response_data)

        if is_struct(response_data):
            response_data = self._create_struct_response(response_data, depth)
        elif isinstance(response_data, (list, tuple)):
            response_data = self._create_list_response(response_data, depth)
        elif isinstance(response_data, Mapping):
            response_data = self._create_map_response(response_data, depth)

        if self.fixer is not None:
            response_data = self.fixer(response_data)

        return response_data

    def _create_struct_response(self, value: Any, depth: int) -> Any:
        # Nullable wrapper types (NullInt, NullString, ...) collapse to their value.
        try:
            return unwrap_nullable(value, self.nullable_prefix)
        except NullableMismatch:
            pass

        response: dict[str, Any] = {}
        for descriptor in describe(value):
            if descriptor.embedded:
                self._merge_embedded(response, getattr(value, descriptor.name), depth)
                continue

            name = response_tag(descriptor, self.secondary_tag)
            if name == "-":
                continue
            if not self._is_included(descriptor):
                continue

            field_value = read_field(value, descriptor)
            if field_value is MISSING:
                logger.debug(f"No getter for {type(value).__qualname__}.{descriptor.name}, skipping")
                continue

            response[name] = self._create_response_value(field_value, depth + 1, descriptor.declared_type)
        return response

    def _merge_embedded(self, response: dict[str, Any], embedded: Any, depth: int) -> None:
        embedded_response = self._create_response(embedded, depth)
        if not isinstance(embedded_response, Mapping):
            logger.debug(f"Embedded value converted to {type(embedded_response).__qualname__}, not merged")
            return
        for key, item in embedded_response.items():
            # Values from the outer struct win.
            if key not in response:
                response[key] = item

    def _is_included(self, descriptor: FieldDescriptor) -> bool:
        return any(self.should_include(condition) for condition in descriptor.conditions())

    def _create_list_response(self, value: list[Any] | tuple[Any, ...], depth: int) -> list[Any]:
        if depth == 0:
            return [self._create_collection_element(element, depth + 1) for element in value]
        return [self._create_response_value(element, depth + 1) for element in value]

    def _create_collection_element(self, element: Any, depth: int) -> Any:
        if provides(element, CollectionResponseConverter):
            element = element.collection_response()
        return self._create_response(element, depth)

    def _create_map_response(self, value: Mapping[Any, Any], depth: int) -> dict[str, Any]:
        response: dict[str, Any] = {}
        for key, item in value.items():
            name = _map_key(key)
            if name in response:
                # Later entries win, e.g. 1 and "1" both become "1".
                logger.debug(f"Map key {key!r} collides with an earlier key as {name!r}, overwriting")
            response[name] = self._create_response_value(item, depth + 1)
        return response

    def _create_response_value(self, value: Any, depth: int, declared_type: Any = None) -> Any:
        """Convert a sub-element of the response (a field, list element or map value)."""
        # A dead weak reference is absent, like None.
        value = _dereference(value)
        if value is None:
            nil_converter = _nil_converter(declared_type)
            if nil_converter is None:
                return None
            value = nil_element_data(nil_converter)

        if provides(value, ResponseElementConverter):
            value = value.response_element_data(self.options)

        return self._create_response(value, depth)


def _renders_as_string(value: Any) -> bool:
    if isinstance(value, _PLAIN_TYPES):
        return False
    return type(value).__str__ not in _DEFAULT_STR_METHODS


def _dereference(value: Any) -> Any:
    while isinstance(value, weakref.ref):
        value = value()
    return value


def _map_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, enum.Enum):
        return str(key.value)
    return str(key)


def _nil_converter(declared_type: Any) -> Any:
    """Return the class that provides ``nil_element_data`` for a declared field type."""
    for candidate in _non_none_members(declared_type):
        if provides_nil_element_data(candidate):
            return candidate
    return None


def _non_none_members(declared_type: Any) -> tuple[Any, ...]:
    if declared_type is None:
        return ()
    origin = typing.get_origin(declared_type)
    if origin is typing.Union or origin is types.UnionType:
        return tuple(arg for arg in typing.get_args(declared_type) if arg is not type(None))
    return (declared_type,)
