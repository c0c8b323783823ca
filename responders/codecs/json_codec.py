"""JSON codec for converted responses."""

from __future__ import annotations

import json
import logging
from typing import Any

from ..core.config import get_config
from ..core.exceptions import CodecError
from .base import Codec

logger = logging.getLogger(__name__)


class JsonCodec(Codec):
    content_type = "application/json"

    def __init__(self, indent: int | None = None, ensure_ascii: bool | None = None) -> None:
        config = get_config()
        self.indent = config.json_indent if indent is None else indent
        self.ensure_ascii = config.json_ensure_ascii if ensure_ascii is None else ensure_ascii

    def encode(self, output: Any) -> bytes:
        try:
            text = json.dumps(output, indent=self.indent, ensure_ascii=self.ensure_ascii)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to encode response as JSON: {e}")
            raise CodecError(f"Cannot encode response as JSON: {e}") from e
        return text.encode("utf-8")
