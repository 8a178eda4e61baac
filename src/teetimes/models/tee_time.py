"""
Tee time models for the tee times application.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeSlot:
    """One available tee time within a schedule column."""
    label: str
    text: str

@dataclass(frozen=True)
class Column:
    """Positionally indexed course/tee grouping of the schedule grid."""
    index: int

    ELEMENT_ID_FORMAT = 'ts{index}'
    TITLE_ID_FORMAT = 'crltitle{index}'

    @property
    def element_id(self) -> str:
        """Id of the element holding the column's cells."""
        return self.ELEMENT_ID_FORMAT.format(index=self.index)

    @property
    def title_id(self) -> str:
        """Id of the element holding the column's title."""
        return self.TITLE_ID_FORMAT.format(index=self.index)

    @property
    def default_label(self) -> str:
        """Label used when the page has no title for the column."""
        return f"Column {self.index + 1}"
