"""The table a struct decoder uses to find a field by its JSON name."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from .bindings import Binding, resolve_conflict_binding


def _winning_bindings(bindings: Sequence[Binding]) -> Dict[str, Binding]:
    chosen: Dict[str, Binding] = {}
    for binding in bindings:
        for from_name in binding.from_names:
            old = chosen.get(from_name)
            if old is None:
                chosen[from_name] = binding
                continue
            ignore_old, ignore_new = resolve_conflict_binding(old, binding)
            if ignore_old:
                del chosen[from_name]
            if not ignore_new:
                chosen[from_name] = binding
    return chosen


def decoder_field_table(bindings: Sequence[Binding], case_sensitive: bool = True) -> Dict[str, Any]:
    """Map each accepted JSON name to the decoder of the field it fills.

    Bindings that clash on a name are resolved as for encoding; when both
    sides of a clash are dropped the name is not accepted at all.  Unless
    ``case_sensitive`` is set, a lower-case form of every name is added too,
    without replacing a name that is already there.
    """
    chosen = _winning_bindings(bindings)
    fields: Dict[str, Any] = {name: binding.decoder for name, binding in chosen.items()}
    if not case_sensitive:
        for name, binding in chosen.items():
            fields.setdefault(name.lower(), binding.decoder)
    return fields