"""Codec interface for encoding converted responses."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..core.response import Response
from ..core.types import Constructor, Fixer, InclusionPredicate, Options, PreMarshaller, provides


class Codec(ABC):
    content_type: str = "application/octet-stream"
    # Defaults used when marshal() is not given hooks of its own.
    constructor: Constructor | None = None
    fixer: Fixer | None = None

    def marshal(
        self,
        data: Any,
        constructor: Constructor | None = None,
        fixer: Fixer | None = None,
        options: Options | None = None,
        should_include: InclusionPredicate | None = None,
    ) -> bytes:
        """Convert ``data`` into an output tree and encode it.

        Data implementing ``pre_marshal()`` gets it called first.
        """
        if provides(data, PreMarshaller):
            data.pre_marshal()
        response = Response(
            data,
            constructor=constructor or self.constructor,
            fixer=fixer or self.fixer,
            options=options,
            should_include=should_include,
        )
        return self.encode(response.output())

    @abstractmethod
    def encode(self, output: Any) -> bytes:
        """Encode an already converted output tree."""
