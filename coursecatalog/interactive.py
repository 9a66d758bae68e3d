from __future__ import annotations

from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from coursecatalog.catalog import Catalog
from coursecatalog.model import Level
from coursecatalog.parse import CatalogError, parse_course


PromptFn = Callable[[str], str]


class Session:
    """
    One interactive session over a catalog.

    `console` and `prompt_fn` can be replaced (e.g. in tests) to capture
    output and feed scripted answers.
    """

    def __init__(
        self,
        catalog: Catalog,
        console: Optional[Console] = None,
        prompt_fn: Optional[PromptFn] = None,
    ) -> None:
        self.catalog = catalog
        self.console = console if console is not None else Console()
        self._prompt_fn = prompt_fn if prompt_fn is not None else self.console.input

    def println(self, msg: str = "") -> None:
        # markup=False: course names and categories are printed literally
        self.console.print(msg, markup=False, highlight=False)

    def prompt(self, msg: str) -> str:
        return self._prompt_fn(msg)

    def ask_level(self) -> Optional[Level]:
        text = self.prompt("Level (PRINCIPIANTE/INTERMEDIO/AVANZADO): ").strip()
        try:
            return Level.from_text(text)
        except ValueError:
            self.println(f"Unknown level: {text}")
            return None


def run_interactive(
    catalog: Catalog,
    console: Optional[Console] = None,
    prompt_fn: Optional[PromptFn] = None,
) -> None:
    """
    Interactive menu loop over an already loaded catalog.
    """
    session = Session(catalog, console=console, prompt_fn=prompt_fn)

    while True:
        session.println("\n=== Course catalog (interactive) ===")
        session.println(f"Categories: {len(catalog.categories())} | Courses: {len(catalog)}")

        choice = session.prompt(
            "\n[1] List categories\n"
            "[2] Show catalog\n"
            "[3] Add a course\n"
            "[4] Count courses in a category\n"
            "[5] Delete courses of a category/level\n"
            "[6] Oldest course\n"
            "[0] Exit\n"
            "Select: "
        ).strip()

        if choice == "0":
            session.println("Bye.")
            return

        if choice == "1":
            _flow_categories(session)
        elif choice == "2":
            _flow_show(session)
        elif choice == "3":
            _flow_add(session)
        elif choice == "4":
            _flow_count(session)
        elif choice == "5":
            _flow_delete(session)
        elif choice == "6":
            _flow_oldest(session)
        else:
            session.println("Invalid choice.")


def _flow_categories(session: Session) -> None:
    categories = session.catalog.categories()
    if not categories:
        session.println("No categories.")
        return

    table = Table(title="Categories", box=box.SIMPLE)
    table.add_column("Category")
    table.add_column("Courses", justify="right")
    for category in categories:
        table.add_row(Text(category), str(session.catalog.count_in(category)))
    session.console.print(table)


def _flow_show(session: Session) -> None:
    if not session.catalog.categories():
        session.println("The catalog is empty.")
        return
    session.println(session.catalog.render())


def _flow_add(session: Session) -> None:
    """
    Ask for the fields of a new course and add it.
    Input is validated with the same parser used for catalog files.
    """
    category = session.prompt("Category [blank = back]: ").strip()
    if not category:
        return

    name = session.prompt("Name: ").strip()
    published = session.prompt("Published (dd/mm/yyyy): ").strip()
    level = session.prompt("Level (PRINCIPIANTE/INTERMEDIO/AVANZADO): ").strip()

    if not name or ":" in name:
        session.println("Invalid name.")
        return

    try:
        course = parse_course(f"{name}:{published}:{level}")
    except CatalogError as exc:
        session.println(f"Not added: {exc}")
        return

    session.catalog.add_course(category, course)
    session.println(f"Added: {course.name} -> {category.upper()} ({session.catalog.count_in(category)})")


def _flow_count(session: Session) -> None:
    """
    Print the number of courses of a category and list them.
    """
    category = session.prompt("Category: ").strip()
    total = session.catalog.count_in(category)
    if total < 0:
        session.println(f"Category not found: {category.upper()}")
        return
    session.println(f"{category.upper()}: {total}")
    if total == 0:
        return

    table = Table(title=Text(category.upper()), box=box.SIMPLE)
    table.add_column("Course")
    table.add_column("Published")
    table.add_column("Level")
    for course in session.catalog.courses_in(category):
        table.add_row(Text(course.name), course.formatted_date(), str(course.level))
    session.console.print(table)


def _flow_delete(session: Session) -> None:
    category = session.prompt("Category [blank = back]: ").strip()
    if not category:
        return
    if category not in session.catalog:
        session.println(f"Category not found: {category.upper()}")
        return

    level = session.ask_level()
    if level is None:
        return

    removed = session.catalog.delete_courses_of(category, level)
    if not removed:
        session.println("Nothing deleted.")
        return

    table = Table(title=f"Deleted ({len(removed)})", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Course")
    for i, name in enumerate(removed, start=1):
        table.add_row(str(i), Text(name))
    session.console.print(table)


def _flow_oldest(session: Session) -> None:
    name = session.catalog.oldest_course()
    if not name:
        session.println("The catalog is empty.")
        return
    session.println(f"Oldest course: {name}")
