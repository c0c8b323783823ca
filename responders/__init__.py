"""Convert response data into generic, wire-ready output trees."""

from .codecs import Codec, JsonCodec
from .core import (
    CodecError,
    CollectionResponseConverter,
    LazyLoader,
    NilElementConverter,
    PreMarshaller,
    ResponderConfig,
    ResponderError,
    Response,
    ResponseConverter,
    ResponseElementConverter,
    get_config,
    initialize,
    load_responder_config,
    response_field,
    set_config,
    set_should_include,
)
from .core.logger import LogLevel, configure_logger, get_log_level, set_log_level

__version__ = "0.1.0"

__all__ = [
    # Core
    "Response",
    "response_field",
    # Capabilities
    "LazyLoader",
    "ResponseConverter",
    "ResponseElementConverter",
    "NilElementConverter",
    "CollectionResponseConverter",
    "PreMarshaller",
    # Config
    "ResponderConfig",
    "initialize",
    "get_config",
    "set_config",
    "set_should_include",
    "load_responder_config",
    # Logger
    "LogLevel",
    "configure_logger",
    "set_log_level",
    "get_log_level",
    # Codecs
    "Codec",
    "JsonCodec",
    # Errors
    "ResponderError",
    "CodecError",
]
