"""Struct field bindings and resolution of clashing output names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple


@dataclass(eq=False)
class Binding:
    """How one struct field maps to JSON names.

    ``levels`` holds the field's index path through embedded structs; a
    shorter path means a shallower field.  ``tag`` is the field's JSON tag,
    empty when it has none.
    """

    field_name: str
    to_names: List[str] = field(default_factory=list)
    from_names: List[str] = field(default_factory=list)
    levels: List[int] = field(default_factory=list)
    tag: str = ""
    encoder: Any = None
    decoder: Any = None

    @property
    def tagged(self) -> bool:
        return self.tag != ""


def _by_depth(old: Binding, new: Binding) -> Tuple[bool, bool]:
    if len(old.levels) > len(new.levels):
        return True, False
    if len(new.levels) > len(old.levels):
        return False, True
    return True, True


def resolve_conflict_binding(old: Binding, new: Binding) -> Tuple[bool, bool]:
    """Decide which of two bindings sharing a name to drop.

    Returns ``(ignore_old, ignore_new)``.
    """
    if new.tagged:
        if old.tagged:
            return _by_depth(old, new)
        return True, False
    if old.tagged:
        return True, False
    return _by_depth(old, new)


@dataclass
class _Entry:
    binding: Binding
    to_name: str
    ignored: bool = False


def ordered_bindings(bindings: Sequence[Binding]) -> List[Tuple[Binding, str]]:
    """Return the ``(binding, name)`` pairs that survive, in field order."""
    entries: List[_Entry] = []
    for binding in bindings:
        for to_name in binding.to_names:
            new = _Entry(binding, to_name)
            for old in entries:
                if old.to_name != to_name:
                    continue
                old.ignored, new.ignored = resolve_conflict_binding(
                    old.binding, new.binding
                )
            entries.append(new)
    return [(entry.binding, entry.to_name) for entry in entries if not entry.ignored]