"""
Central data model definitions used across the project.

This module defines:
- Level: the ordered difficulty tier of a course
- Course: one course of the catalog (name, publication date, level)

Course objects are immutable: the name is normalized once at construction
and never changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from functools import total_ordering


# Fixed month names so the output does not depend on the process locale
MONTH_NAMES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)

LABEL_WIDTH = 20


@total_ordering
class Level(Enum):
    """
    Difficulty tier of a course.

    Members are ordered: PRINCIPIANTE < INTERMEDIO < AVANZADO.
    """

    PRINCIPIANTE = 1
    INTERMEDIO = 2
    AVANZADO = 3

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_text(cls, text: str) -> "Level":
        """
        Look up a level by name, ignoring case and surrounding whitespace.
        Raises ValueError for unknown names.
        """
        key = text.strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown level: {text!r}") from None


def capitalize_name(name: str) -> str:
    """
    Normalize a course name.

    - surrounding whitespace is removed
    - runs of whitespace between words become one space
    - the first character of every word is upper-cased, the rest is kept as given

    " wordpress PLugin development " -> "Wordpress PLugin Development"
    """
    return " ".join(word[0].upper() + word[1:] for word in name.split())


@dataclass(frozen=True)
class Course:
    """
    Represents one course as stored in the catalog.
    """

    name: str
    published: date
    level: Level

    def __post_init__(self) -> None:
        # frozen dataclass: bypass __setattr__ to store the normalized name
        object.__setattr__(self, "name", capitalize_name(self.name))

    def formatted_date(self) -> str:
        """
        Publication date as "<dd> <month name> <yyyy>", e.g. "03 diciembre 2019".
        """
        month = MONTH_NAMES[self.published.month - 1]
        return f"{self.published.day:02d} {month} {self.published.year:04d}"

    def render(self) -> str:
        """
        Multi-line text block with right-aligned labels, followed by a blank line.
        """
        lines = [
            f"{'Nombre':>{LABEL_WIDTH}}: {self.name}",
            f"{'Publicado desde':>{LABEL_WIDTH}}: {self.formatted_date()}",
            f"{'Nivel':>{LABEL_WIDTH}}: {self.level}",
        ]
        return "\n".join(lines) + "\n\n"

    def __str__(self) -> str:
        return self.render()
