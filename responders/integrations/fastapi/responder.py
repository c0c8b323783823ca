from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi.responses import JSONResponse
from starlette.background import BackgroundTask

from ...codecs import JsonCodec
from ...core.types import Constructor, Fixer, InclusionPredicate, Options


class ResponderJSONResponse(JSONResponse):
    """JSONResponse that runs its content through the response converter.

    Return it from the route; as a ``response_class`` FastAPI would already have
    run ``jsonable_encoder`` over the data and the field tags would be lost::

        @app.get("/accounts/{account_id}")
        def get_account(account_id: int):
            return ResponderJSONResponse(load_account(account_id))
    """

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
        *,
        constructor: Constructor | None = None,
        fixer: Fixer | None = None,
        options: Options | None = None,
        should_include: InclusionPredicate | None = None,
    ) -> None:
        # render() runs inside the parent constructor, so these must be set first.
        self.codec = JsonCodec()
        self.constructor = constructor
        self.fixer = fixer
        self.options = options
        self.should_include = should_include
        super().__init__(content, status_code, headers, media_type, background)

    def render(self, content: Any) -> bytes:
        return self.codec.marshal(
            content,
            constructor=self.constructor,
            fixer=self.fixer,
            options=self.options,
            should_include=self.should_include,
        )
