"""Common test utilities for responders tests."""

from __future__ import annotations

from typing import Any

from responders import Response


def output_of(data: Any, **kwargs: Any) -> Any:
    """Convert ``data`` with a fresh Response and return its output."""
    return Response(data, **kwargs).output()


class CallRecorder:
    """Records the arguments of every call, for use as a constructor, fixer or predicate.

    Args:
        result: Callable computing the return value from the call arguments.
            Defaults to returning the first argument.
    """

    def __init__(self, result: Any = None) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self._result = result

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self._result is not None:
            return self._result(*args)
        return args[0]

    @property
    def count(self) -> int:
        return len(self.calls)
