"""
CLI (Command Line Interface).

Without a sub-command the CLI runs the demo scenario on the bundled catalog:
print it, print the oldest course, delete two category/level combinations
and print the catalog again.

Quick commands for power users and for testing:

    coursecatalog show
    coursecatalog categories
    coursecatalog count <category>
    coursecatalog oldest
    coursecatalog delete <category> <level>
    coursecatalog interactive

Every command accepts --file <path> (before the command) to read another catalog file.

Note:
- The interactive UI lives in coursecatalog/interactive.py
- This CLI is intentionally simple and prints plain text (no rich formatting)
"""

from __future__ import annotations

import argparse

from coursecatalog.catalog import Catalog
from coursecatalog.model import Level
from coursecatalog.parse import CatalogError
from coursecatalog.storage import load_catalog


SEPARATOR_LINE = "------------------"

# (category, level) pairs deleted by the demo scenario
DEMO_DELETIONS = (
    ("bases de datos", Level.AVANZADO),
    ("cms", Level.INTERMEDIO),
)


def _format_names(names: list[str]) -> str:
    return "[" + ", ".join(names) + "]"


def _print_deletion(catalog: Catalog, category: str, level: Level) -> None:
    print(f"Borrando cursos de {category.upper()} y nivel {level}")
    removed = catalog.delete_courses_of(category, level)
    print(f"Borrados = {_format_names(removed)}\n")


def _run_demo(catalog: Catalog) -> int:
    """
    Demo scenario: show, oldest course, two deletions, show again.
    """
    print(catalog.render())
    print(f"Curso más antiguo: {catalog.oldest_course()}\n")

    print(SEPARATOR_LINE)
    for category, level in DEMO_DELETIONS:
        _print_deletion(catalog, category, level)
    print(SEPARATOR_LINE + "\n")

    print("Después de borrar ....")
    print(catalog.render())
    return 0


def _cmd_show(args: argparse.Namespace, catalog: Catalog) -> int:
    print(catalog.render())
    return 0


def _cmd_categories(args: argparse.Namespace, catalog: Catalog) -> int:
    """
    Print every category with its number of courses.
    """
    categories = catalog.categories()
    if not categories:
        print("No categories.")
        return 0

    for category in categories:
        print(f"{category} ({catalog.count_in(category)})")
    return 0


def _cmd_count(args: argparse.Namespace, catalog: Catalog) -> int:
    # "" is a valid category (line ":name:date:level")
    category = (args.category or "").strip()
    total = catalog.count_in(category)
    if total < 0:
        print(f"Category not found: {category.upper()}")
        return 1

    print(f"{category.upper()}: {total}")
    return 0


def _cmd_oldest(args: argparse.Namespace, catalog: Catalog) -> int:
    name = catalog.oldest_course()
    if not name:
        print("The catalog is empty.")
        return 0

    print(f"Curso más antiguo: {name}")
    return 0


def _cmd_delete(args: argparse.Namespace, catalog: Catalog) -> int:
    """
    Delete courses of a category/level and print the remaining catalog.
    """
    category = (args.category or "").strip()
    if category not in catalog:
        # deleting from an unknown category is not supported
        print(f"Category not found: {category.upper()}")
        return 1

    _print_deletion(catalog, category, args.level)
    print(catalog.render())
    return 0


def _level_arg(text: str) -> Level:
    try:
        return Level.from_text(text)
    except ValueError:
        names = ", ".join(level.name for level in Level)
        raise argparse.ArgumentTypeError(f"invalid level {text!r} (choose from {names})") from None


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="coursecatalog", description="Course catalog CLI")
    parser.add_argument("--file", "-f", type=str, default=None, help="Catalog file (default: bundled cursos.csv)")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("show", help="Print the whole catalog")
    sub.add_parser("categories", help="List categories with their course counts")

    p_count = sub.add_parser("count", help="Number of courses in a category")
    p_count.add_argument("category", type=str, help="Category (case-insensitive)")

    sub.add_parser("oldest", help="Show the first published course")

    p_delete = sub.add_parser("delete", help="Delete courses of a category and above a level")
    p_delete.add_argument("category", type=str, help="Category (case-insensitive)")
    p_delete.add_argument("level", type=_level_arg, help="PRINCIPIANTE, INTERMEDIO or AVANZADO")

    sub.add_parser("interactive", help="Interactive menu mode")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, loads the catalog, dispatches to command
    handlers, and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        catalog = load_catalog(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Cannot read catalog file: {exc}")
        raise SystemExit(1)
    except CatalogError as exc:
        print(f"Invalid catalog file: {exc}")
        raise SystemExit(1)

    if args.command is None:
        raise SystemExit(_run_demo(catalog))
    if args.command == "show":
        raise SystemExit(_cmd_show(args, catalog))
    if args.command == "categories":
        raise SystemExit(_cmd_categories(args, catalog))
    if args.command == "count":
        raise SystemExit(_cmd_count(args, catalog))
    if args.command == "oldest":
        raise SystemExit(_cmd_oldest(args, catalog))
    if args.command == "delete":
        raise SystemExit(_cmd_delete(args, catalog))

    if args.command == "interactive":
        from coursecatalog.interactive import run_interactive

        run_interactive(catalog)
        raise SystemExit(0)

    raise SystemExit(2)
