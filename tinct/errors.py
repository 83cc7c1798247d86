from typing import Any


class InvalidColorInput(ValueError):
    """Raised when a raw value cannot be read as a color."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        message = f"`{value!r}` is not a valid color"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
