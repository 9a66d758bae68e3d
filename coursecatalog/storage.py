"""
Reading catalog files from disk.

By default the catalog is read from the bundled file:

    coursecatalog/data/cursos.csv

Any other file with the same line format can be passed explicitly
(CLI option --file, or the `path` argument below).
"""

from __future__ import annotations

from pathlib import Path

from coursecatalog.catalog import Catalog


def _default_catalog_path() -> Path:
    """
    Return the path of the catalog file shipped inside the package.

    Using a function instead of a constant makes testing easier,
    because tests can override the path.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "cursos.csv"


def read_catalog_lines(path: str | Path | None = None) -> list[str]:
    """
    Read all lines of a catalog file (UTF-8, optional BOM).

    OSError / UnicodeDecodeError propagate: a missing catalog is an error,
    not an empty catalog.
    """
    catalog_path = Path(path) if path is not None else _default_catalog_path()
    return catalog_path.read_text(encoding="utf-8-sig").splitlines()


def load_catalog(path: str | Path | None = None) -> Catalog:
    """
    Create a new Catalog filled from a catalog file.
    """
    catalog = Catalog()
    catalog.load_from(read_catalog_lines(path))
    return catalog
