"""Option data models."""

from enum import Enum


class OptionType(Enum):
    """Option type: Call or Put."""

    CALL = "call"
    PUT = "put"

    @classmethod
    def from_is_call(cls, is_call: bool) -> "OptionType":
        """Map the boolean call flag used by order payloads to an OptionType."""
        return cls.CALL if is_call else cls.PUT

    @property
    def is_call(self) -> bool:
        return self is OptionType.CALL
