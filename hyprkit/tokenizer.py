"""Field access for the comma separated payload of an event line."""

from .errors import InvalidBoolean, InvalidInteger, UnexpectedEof
from .models import WindowAddress, WorkspaceId, parse_int

__all__ = ["FieldTokenizer"]


class FieldTokenizer:
    """Consume the fields of one event payload, in order.

    The payload is split on "," once; every `next_*` call consumes one field.
    Empty fields are kept (they mean "no value" for optional fields).
    """

    def __init__(self, payload: str) -> None:
        self._fields = payload.split(",")
        self._pos = 0

    def __repr__(self) -> str:
        return f"FieldTokenizer({self._fields!r}, pos={self._pos})"

    @property
    def remaining(self) -> int:
        """Number of fields not consumed yet."""
        return len(self._fields) - self._pos

    def next_token(self) -> str:
        """Return the next raw field.

        Raises:
            UnexpectedEof: no field left
        """
        if self._pos >= len(self._fields):
            msg = "unexpected end of data"
            raise UnexpectedEof(msg)
        token = self._fields[self._pos]
        self._pos += 1
        return token

    def next_string(self) -> str:
        """Return the next field verbatim."""
        return self.next_token()

    def next_workspace_id(self) -> WorkspaceId:
        """Return the next field as a workspace id (hexadecimal, signed 32 bits)."""
        return WorkspaceId(self._parse(self.next_token(), 16, signed=True, bits=32))

    def next_window_address(self) -> WindowAddress:
        """Return the next field as a window address (hexadecimal without "0x")."""
        return WindowAddress(self._parse(self.next_token(), 16, signed=False, bits=64))

    def next_optional_window_address(self) -> WindowAddress | None:
        """Same as `next_window_address`, but an empty field gives None."""
        token = self.next_token()
        if not token:
            return None
        return WindowAddress(self._parse(token, 16, signed=False, bits=64))

    def next_bool(self) -> bool:
        """Return the next field as a boolean, only "true" and "false" are valid."""
        token = self.next_token()
        if token == "true":
            return True
        if token == "false":
            return False
        msg = f"invalid boolean: {token!r}"
        raise InvalidBoolean(msg)

    def collect_remaining_addresses(self) -> list[WindowAddress]:
        """Consume every remaining field as a decimal window address."""
        addresses = [WindowAddress(self._parse(token, 10, signed=False, bits=64)) for token in self._fields[self._pos :]]
        self._pos = len(self._fields)
        return addresses

    @staticmethod
    def _parse(token: str, base: int, *, signed: bool, bits: int) -> int:
        try:
            return parse_int(token, base, signed=signed, bits=bits)
        except ValueError as e:
            raise InvalidInteger(str(e)) from e
