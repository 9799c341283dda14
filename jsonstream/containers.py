"""Encoders for optional values and sequences."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .stream import Stream


class OptionalEncoder:
    """Encodes ``None`` as ``null`` and anything else with the value encoder."""

    def __init__(self, value_encoder: Any) -> None:
        self.value_encoder = value_encoder

    def encode(self, value: Any, stream: Stream) -> None:
        if value is None:
            stream.write_nil()
        else:
            self.value_encoder.encode(value, stream)

    def is_empty(self, value: Any) -> bool:
        return value is None


class DereferenceEncoder:
    """Like :class:`OptionalEncoder`, but a present value is empty when its
    own encoder says so."""

    def __init__(self, value_encoder: Any) -> None:
        self.value_encoder = value_encoder

    def encode(self, value: Any, stream: Stream) -> None:
        if value is None:
            stream.write_nil()
        else:
            self.value_encoder.encode(value, stream)

    def is_empty(self, value: Any) -> bool:
        if value is None:
            return True
        return self.value_encoder.is_empty(value)

    def is_embedded_ptr_nil(self, value: Any) -> bool:
        """Tell whether the value, or an embedded value inside it, is missing."""
        if value is None:
            return True
        check = getattr(self.value_encoder, "is_embedded_ptr_nil", None)
        if check is None:
            return False
        return check(value)


class SliceEncoder:
    """Encodes a sequence as a JSON array; ``None`` becomes ``null``."""

    def __init__(self, elem_encoder: Any, type_name: str = "") -> None:
        self.elem_encoder = elem_encoder
        self.type_name = type_name

    def encode(self, value: Optional[Sequence[Any]], stream: Stream) -> None:
        if value is None:
            stream.write_nil()
            return
        if len(value) == 0:
            stream.write_empty_array()
            return
        try:
            stream.write_array_start()
            for position, elem in enumerate(value):
                if position:
                    stream.write_more()
                self.elem_encoder.encode(elem, stream)
            stream.write_array_end()
        except ValueError as exc:
            raise ValueError(f"{self.type_name}: {exc}") from exc

    def is_empty(self, value: Optional[Sequence[Any]]) -> bool:
        return value is None or len(value) == 0