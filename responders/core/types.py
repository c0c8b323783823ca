"""Hook signatures and optional capabilities recognized during conversion.

Every capability is an independent protocol. A value may implement any number
of them; the converter checks for each one separately, in a fixed order.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

Options = Mapping[str, Any]

# Called before conversion with (value, depth). Returns (output, descend); when
# descend is False the output is used verbatim.
Constructor = Callable[[Any, int], "tuple[Any, bool]"]

# Called after conversion with the fully built value at a given level.
Fixer = Callable[[Any], Any]

InclusionPredicate = Callable[[str], bool]


@runtime_checkable
class LazyLoader(Protocol):
    """Loads any missing data before the value is inspected."""

    def lazy_load(self, options: Options) -> None: ...


@runtime_checkable
class ResponseConverter(Protocol):
    """Replaces itself with different data wherever it appears in a response."""

    def response_data(self) -> Any: ...


@runtime_checkable
class ResponseElementConverter(Protocol):
    """Replaces itself with different data only when it is a sub-element.

    Not used for the top-level response data, nor for the elements of a
    top-level list. Useful for collapsing a large object into a link or an id
    when it is nested inside another response.
    """

    def response_element_data(self, options: Options) -> Any: ...


@runtime_checkable
class NilElementConverter(Protocol):
    """Provides a substitute for ``None`` fields declared with this type.

    Plain methods are called with ``None`` as ``self``, so they must not touch
    instance state.
    """

    def nil_element_data(self) -> Any: ...


@runtime_checkable
class CollectionResponseConverter(Protocol):
    """Replaces itself when it is an element of a top-level list."""

    def collection_response(self) -> Any: ...


@runtime_checkable
class PreMarshaller(Protocol):
    """Does any work the data needs before a codec converts and encodes it."""

    def pre_marshal(self) -> None: ...


_CAPABILITY_METHODS: dict[type, str] = {
    LazyLoader: "lazy_load",
    ResponseConverter: "response_data",
    ResponseElementConverter: "response_element_data",
    NilElementConverter: "nil_element_data",
    CollectionResponseConverter: "collection_response",
    PreMarshaller: "pre_marshal",
}


def provides(value: Any, capability: type) -> bool:
    """Check that ``value``'s class defines the capability's method.

    Only methods count. An instance attribute or a data field that happens to
    share the method's name does not.
    """
    if isinstance(value, type):
        return False
    return _is_method(inspect.getattr_static(type(value), _CAPABILITY_METHODS[capability], None))


def nil_element_data(cls: type) -> Any:
    """Call ``cls.nil_element_data``; plain methods get ``None`` as the receiver."""
    attribute = inspect.getattr_static(cls, "nil_element_data")
    if isinstance(attribute, (staticmethod, classmethod)):
        return getattr(cls, "nil_element_data")()
    return attribute(None)


def provides_nil_element_data(cls: Any) -> bool:
    return isinstance(cls, type) and _is_method(inspect.getattr_static(cls, "nil_element_data", None))


def _is_method(attribute: Any) -> bool:
    if attribute is None:
        return False
    return isinstance(attribute, (staticmethod, classmethod)) or callable(attribute)
