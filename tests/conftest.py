"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest


@dataclass
class Attendee:
    Name: str
    Present: bool = False


@dataclass
class Meeting:
    Title: str
    Attendance: list[Attendee] = field(default_factory=list)
    Tags: dict[str, str] = field(default_factory=dict)


class RepeaterItem:
    """Stands in for a repeater container exposing the current row index."""

    def __init__(self, index: int) -> None:
        self._index = index
        self.reads = 0

    @property
    def ItemIndex(self) -> int:
        self.reads += 1
        return self._index


@pytest.fixture
def meeting():
    return Meeting(
        Title="Standup",
        Attendance=[Attendee("Ada"), Attendee("Grace", Present=True), Attendee("Linus")],
    )


@pytest.fixture
def container():
    return RepeaterItem(2)
