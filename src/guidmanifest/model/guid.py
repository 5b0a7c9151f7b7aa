from __future__ import annotations

from dataclasses import dataclass

from guidmanifest.errors import FormatError

GUID_LENGTH = 32
_HEX_DIGITS = frozenset("0123456789abcdef")


def is_valid_guid(text: str) -> bool:
    return len(text) == GUID_LENGTH and all(ch in _HEX_DIGITS for ch in text)


@dataclass(frozen=True, order=True)
class GUID:
    """32 lowercase hex digits identifying one installed asset."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_guid(self.value):
            raise FormatError(f"invalid guid {self.value!r}")

    @classmethod
    def parse(cls, text: str) -> "GUID":
        return cls(text)

    def __str__(self) -> str:
        return self.value
