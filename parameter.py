"""Query-string parameter entity."""
from typing import Tuple

from errors import ConstructionError, type_line


class URLParameter:
    """One key/value pair with an enabled/disabled state."""

    __slots__ = ("key", "value", "enabled")

    def __init__(self, key: str, value: str):
        if not isinstance(key, str) or not isinstance(value, str):
            error = ConstructionError()
            error.add_line(
                "Both 'key' and 'value' are expected to be strings."
                "\n\tTip: convert numbers explicitly, e.g. str(number)."
            )
            error.add_line(type_line("key", key))
            error.add_line(type_line("value", value))
            raise error

        self.key = key
        self.value = value
        self.enabled = True

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def toggle(self) -> None:
        self.enabled = not self.enabled

    @property
    def status(self) -> bool:
        return self.enabled

    def as_pair(self) -> Tuple[str, str]:
        return (self.key, self.value)

    def __repr__(self) -> str:
        state = "on" if self.enabled else "off"
        return f"URLParameter({self.key!r}, {self.value!r}, {state})"
