"""
In-memory course catalog.

A Catalog maps a category (e.g. "BASES DE DATOS") to the list of courses
published in that category.

Rules:
- category keys are always stored upper-case and iterated alphabetically
- courses keep their insertion order inside a category
- a category stays in the catalog even after all its courses were deleted
"""

from __future__ import annotations

from typing import Iterable, Iterator

from coursecatalog.model import Course, Level
from coursecatalog.parse import CatalogError, parse_line


def _key(category: str) -> str:
    return category.upper()


class Catalog:
    def __init__(self) -> None:
        self._courses: dict[str, list[Course]] = {}

    # -----------------------------------------------------------------------
    # Mutations
    # -----------------------------------------------------------------------

    def add_course(self, category: str, course: Course) -> None:
        """
        Append a course to its category, creating the category if needed.
        """
        self._courses.setdefault(_key(category), []).append(course)

    def delete_courses_of(self, category: str, level: Level) -> list[str]:
        """
        Delete courses and return the distinct names removed, sorted.

        Two passes:
        1) every course of `category`, whatever its level
        2) in ALL categories, every course whose level is above `level`

        The category is expected to exist; if it does not, pass 1 removes nothing.
        """
        removed: set[str] = set()

        target = _key(category)
        if target in self._courses:
            removed.update(c.name for c in self._courses[target])
            self._courses[target] = []

        for key, courses in self._courses.items():
            # collect first, then rebuild: never remove from a list while iterating it
            too_hard = [c for c in courses if c.level > level]
            if not too_hard:
                continue
            removed.update(c.name for c in too_hard)
            self._courses[key] = [c for c in courses if not c.level > level]

        return sorted(removed)

    def load_from(self, lines: Iterable[str]) -> None:
        """
        Add one course per "category:name:dd/mm/yyyy:level" line.

        Blank lines are ignored. The first malformed line raises
        FormatError/ParseError carrying its line number; courses read before it
        stay in the catalog.
        """
        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                category, course = parse_line(line)
            except CatalogError as exc:
                raise exc.at_line(line_no) from None
            self.add_course(category, course)

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    def count_in(self, category: str) -> int:
        """
        Number of courses in `category`, or -1 if the category does not exist.
        """
        courses = self._courses.get(_key(category))
        if courses is None:
            return -1
        return len(courses)

    def categories(self) -> list[str]:
        return sorted(self._courses)

    def courses_in(self, category: str) -> list[Course]:
        return list(self._courses.get(_key(category), []))

    def oldest_course(self) -> str:
        """
        Name of the first published course in the whole catalog ("" if empty).
        On equal dates the first one found (category order, then insertion order) wins.
        """
        oldest: Course | None = None
        for course in self._iter_courses():
            if oldest is None or course.published < oldest.published:
                oldest = course
        return oldest.name if oldest is not None else ""

    def _iter_courses(self) -> Iterator[Course]:
        for key in self.categories():
            yield from self._courses[key]

    # -----------------------------------------------------------------------
    # Text output
    # -----------------------------------------------------------------------

    def render(self) -> str:
        """
        Every category with its course count, followed by its courses.
        """
        parts: list[str] = []
        for key in self.categories():
            parts.append(f"{key} ({self.count_in(key)})\n")
            for course in self._courses[key]:
                parts.append(course.render() + "\n\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return sum(len(courses) for courses in self._courses.values())

    def __contains__(self, category: object) -> bool:
        return isinstance(category, str) and _key(category) in self._courses
