"""Core response conversion for the responders package."""

from .config import (
    ResponderConfig,
    get_config,
    include_all,
    initialize,
    load_responder_config,
    set_config,
    set_should_include,
)
from .exceptions import CodecError, NullableMismatch, ResponderError
from .fields import FieldDescriptor, describe, response_field, response_tag
from .nullable import unwrap_nullable
from .response import Response
from .types import (
    CollectionResponseConverter,
    Constructor,
    Fixer,
    InclusionPredicate,
    LazyLoader,
    NilElementConverter,
    Options,
    PreMarshaller,
    ResponseConverter,
    ResponseElementConverter,
)

__all__ = [
    # Response
    "Response",
    # Config
    "ResponderConfig",
    "get_config",
    "set_config",
    "set_should_include",
    "include_all",
    "initialize",
    "load_responder_config",
    # Fields
    "FieldDescriptor",
    "describe",
    "response_field",
    "response_tag",
    "unwrap_nullable",
    # Hooks and capabilities
    "Constructor",
    "Fixer",
    "InclusionPredicate",
    "Options",
    "LazyLoader",
    "ResponseConverter",
    "ResponseElementConverter",
    "NilElementConverter",
    "CollectionResponseConverter",
    "PreMarshaller",
    # Errors
    "ResponderError",
    "CodecError",
    "NullableMismatch",
]
