"""Immutable builder for model-binding input names."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """A named member step, rendered as ``.name``."""

    name: str


@dataclass(frozen=True)
class Index:
    """An integer index step, rendered as ``[value]``."""

    value: int


Segment = Member | Index


@dataclass(frozen=True)
class InputName:
    """An input name that works with model binding.

    This is the fast, low-level interface: no expression is parsed. Each
    append returns a new value, so a prefix can be shared between inputs::

        rows = InputName().append_member("Attendance")
        rows.append_index(2).append_member("Name").render()
        # 'Attendance[2].Name'

    Subscripting is shorthand for the append methods, ``name["Attendance"][2]``
    is the same as ``name.append_member("Attendance").append_index(2)``.
    """

    segments: tuple[Segment, ...] = ()

    @classmethod
    def empty(cls) -> InputName:
        return cls()

    def append_index(self, i: int) -> InputName:
        """Add an indexer, rendered as ``[i]`` with no separator."""
        # bool is an int subclass but never a valid indexer
        if isinstance(i, bool):
            raise TypeError("input name index must be int, not bool")
        return InputName(self.segments + (Index(i),))

    def append_member(self, name: str) -> InputName:
        """Add a property, rendered as ``.name`` or ``name`` when first."""
        return InputName(self.segments + (Member(name),))

    def __getitem__(self, key: int | str) -> InputName:
        if isinstance(key, int):
            return self.append_index(key)
        if isinstance(key, str):
            return self.append_member(key)
        raise TypeError(f"input name key must be int or str, not {type(key).__name__}")

    def __len__(self) -> int:
        return len(self.segments)

    def render(self) -> str:
        """Generate the input name."""
        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, Index):
                parts.append(f"[{segment.value}]")
            elif parts:
                parts.append(f".{segment.name}")
            else:
                parts.append(segment.name)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()
