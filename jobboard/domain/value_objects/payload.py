"""
Payload Value Object - The fields carried on a command's data line.

Fields are separated by ``|``. Inside a field, backslash, pipe, newline
and carriage return are escaped so any text (including multi-line
resumes) fits on one wire line. A plain pipe-delimited line without
backslashes decodes exactly as it reads.
"""

from dataclasses import dataclass, field

from jobboard.domain.exceptions import PayloadFormatError

FIELD_SEPARATOR = "|"
ESCAPE = "\\"

_ENCODE_MAP = {
    "\\": "\\\\",
    "|": "\\|",
    "\n": "\\n",
    "\r": "\\r",
}
_DECODE_MAP = {
    "\\": "\\",
    "|": "|",
    "n": "\n",
    "r": "\r",
}


def encode_field(value: str) -> str:
    """Escape a single field value."""
    return "".join(_ENCODE_MAP.get(ch, ch) for ch in value)


def decode_fields(line: str) -> list[str]:
    """
    Split a data line into unescaped fields.

    Raises:
        PayloadFormatError: On an unknown escape or a dangling backslash.
    """
    fields: list[str] = []
    current: list[str] = []
    chars = iter(enumerate(line))

    for pos, ch in chars:
        if ch == ESCAPE:
            nxt = next(chars, None)
            if nxt is None:
                raise PayloadFormatError(f"dangling escape at position {pos}")
            _, escaped = nxt
            if escaped not in _DECODE_MAP:
                raise PayloadFormatError(
                    f"unknown escape '\\{escaped}' at position {pos}"
                )
            current.append(_DECODE_MAP[escaped])
        elif ch == FIELD_SEPARATOR:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)

    fields.append("".join(current))
    return fields


@dataclass(frozen=True)
class Payload:
    """
    Immutable ordered list of payload fields.

    Attributes:
        fields: Decoded field values in wire order
    """

    fields: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Convert mutable lists to immutable tuples."""
        if isinstance(self.fields, list):
            object.__setattr__(self, "fields", tuple(self.fields))

    def __len__(self) -> int:
        return len(self.fields)

    @classmethod
    def parse(cls, line: str) -> "Payload":
        """Decode a data line (without its line terminator)."""
        return cls(fields=tuple(decode_fields(line)))

    @classmethod
    def of(cls, *values: str) -> "Payload":
        """Build a payload from field values."""
        return cls(fields=tuple(values))

    def encode(self) -> str:
        """Encode to a single data line (without terminator)."""
        return FIELD_SEPARATOR.join(encode_field(v) for v in self.fields)
