from __future__ import annotations

import logging
from typing import Any

from flask import Response as FlaskResponse

from ...codecs import Codec, JsonCodec
from ...core.types import Constructor, Fixer, InclusionPredicate, Options

logger = logging.getLogger(__name__)


def respond(
    data: Any,
    status: int = 200,
    *,
    codec: Codec | None = None,
    constructor: Constructor | None = None,
    fixer: Fixer | None = None,
    options: Options | None = None,
    should_include: InclusionPredicate | None = None,
    headers: dict[str, str] | None = None,
) -> FlaskResponse:
    """Convert ``data`` and return it as a Flask response.

    Exceptions passed as ``data`` are rendered as their message, so handlers
    can respond with an error directly::

        @app.errorhandler(LookupError)
        def not_found(error):
            return respond(error, 404)
    """
    codec = codec or JsonCodec()
    body = codec.marshal(
        data,
        constructor=constructor,
        fixer=fixer,
        options=options,
        should_include=should_include,
    )
    logger.debug(f"Responding with {len(body)} bytes, status {status}")
    return FlaskResponse(body, status=status, headers=headers, content_type=codec.content_type)
