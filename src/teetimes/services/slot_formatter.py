"""
Output formatting for available tee times.
"""

import csv
from abc import ABC
from abc import abstractmethod
from typing import TextIO

from teetimes.config.settings import DISPLAY_CSV
from teetimes.config.settings import DISPLAY_TABLE
from teetimes.exceptions import ArgumentError
from teetimes.models.tee_time import TimeSlot


class SlotFormatter(ABC):
    """Writes tee time slots to a stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    @abstractmethod
    def write(self, slot: TimeSlot) -> None:
        """Write a single slot."""
        ...

class CsvSlotFormatter(SlotFormatter):
    """One ``label,time`` record per slot."""

    def __init__(self, stream: TextIO):
        super().__init__(stream)
        self._writer = csv.writer(stream, lineterminator='\n')

    def write(self, slot: TimeSlot) -> None:
        self._writer.writerow([slot.label, slot.text])

class TableSlotFormatter(SlotFormatter):
    """Slots grouped under an underlined label, one group per label."""

    def __init__(self, stream: TextIO):
        super().__init__(stream)
        self._seen_labels: set[str] = set()

    def _println(self, text: str = '') -> None:
        self.stream.write(f"{text}\n")

    def write(self, slot: TimeSlot) -> None:
        if slot.label not in self._seen_labels:
            if self._seen_labels:
                self._println()

            self._seen_labels.add(slot.label)
            self._println(slot.label)
            self._println('-' * len(slot.label))

        self._println(slot.text)

FORMATTERS: dict[str, type[SlotFormatter]] = {
    DISPLAY_CSV: CsvSlotFormatter,
    DISPLAY_TABLE: TableSlotFormatter,
}

def create_formatter(display: str, stream: TextIO) -> SlotFormatter:
    """Create the formatter for a display mode.

    Raises:
        ArgumentError: If the display mode is not supported
    """
    formatter_class = FORMATTERS.get(display)
    if formatter_class is None:
        raise ArgumentError(f"Display not supported: '{display}'")
    return formatter_class(stream)
