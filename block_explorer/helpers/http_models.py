"""Type definitions for JSON payloads exchanged with the node."""

from typing import Any


# JSON value type - using Any for the recursive case
# since pyright has trouble with recursive type aliases
type JsonValue = str | int | float | bool | dict[str, Any] | list[Any] | None

__all__ = ["JsonValue"]
