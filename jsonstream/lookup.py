"""Finding the decoder for a JSON object key while decoding a struct."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class UnknownFieldError(ValueError):
    """Raised for a key that matches no field when unknown fields are refused."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"found unknown field: {field}")


class FieldLookup:
    """Maps JSON object keys to field decoders.

    ``fields`` is a table such as the one built by
    :func:`jsonstream.fields.decoder_field_table`.  A key is first looked up
    as it is; unless ``case_sensitive`` is set, its lower-case form is tried
    next.  A key that matches nothing gives ``None``, meaning its value is to
    be skipped, or raises :class:`UnknownFieldError` when
    ``disallow_unknown_fields`` is set.
    """

    def __init__(
        self,
        fields: Mapping[str, Any],
        case_sensitive: bool = True,
        disallow_unknown_fields: bool = False,
    ) -> None:
        self.fields: Dict[str, Any] = dict(fields)
        self.case_sensitive = case_sensitive
        self.disallow_unknown_fields = disallow_unknown_fields

    def find(self, name: str) -> Optional[Any]:
        """Return the decoder for the key ``name``, or ``None`` to skip it."""
        decoder = self.fields.get(name)
        if decoder is None and not self.case_sensitive:
            decoder = self.fields.get(name.lower())
        if decoder is None and self.disallow_unknown_fields:
            raise UnknownFieldError(name)
        return decoder