"""
Tests for the CLI entry point.

These tests focus on:
- the demo scenario run without a sub-command (bundled catalog)
- the quick sub-commands against a temporary catalog file
- exit codes for missing / malformed catalog files
"""

import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from coursecatalog.cli import main


SAMPLE = (
    "cms: wordpress plugin development :30/11/2011: intermedio\n"
    "seo : seo avanzado : 21/06/2016 : avanzado\n"
    "bases de datos: sql essential training: 03/12/2019 : principiante\n"
)


def _run(argv: list[str]) -> tuple[int, str]:
    out = io.StringIO()
    with redirect_stdout(out):
        try:
            main(argv)
        except SystemExit as exc:
            code = exc.code if isinstance(exc.code, int) else 1
        else:
            code = 0
    return code, out.getvalue()


class TestCLIDemo(unittest.TestCase):
    def test_demo_on_bundled_catalog(self) -> None:
        code, text = _run([])
        self.assertEqual(code, 0)

        self.assertIn("BASES DE DATOS (3)", text)
        self.assertIn("Curso más antiguo: Wordpress PLugin Development", text)
        self.assertIn("Borrando cursos de BASES DE DATOS y nivel AVANZADO", text)
        self.assertIn(
            "Borrados = [Mongodb Para Desarrolladores, Oracle Performance Tuning, Sql Essential Training]",
            text,
        )
        self.assertIn("Borrando cursos de CMS y nivel INTERMEDIO", text)
        self.assertIn(
            "Borrados = [Drupal 8 Site Building, Java Avanzado Para Profesionales, "
            "Joomla Primeros Pasos, Seo Para Comercio Electronico, Wordpress PLugin Development]",
            text,
        )

        after = text.split("Después de borrar ....", 1)[1]
        self.assertIn("BASES DE DATOS (0)", after)
        self.assertIn("CMS (0)", after)
        self.assertIn("DISEÑO WEB (2)", after)
        self.assertIn("PROGRAMACION (2)", after)
        self.assertIn("SEO (1)", after)


class TestCLICommands(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "courses.txt"
        self.path.write_text(SAMPLE, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_categories(self) -> None:
        code, text = _run(["--file", str(self.path), "categories"])
        self.assertEqual(code, 0)
        self.assertEqual(text.splitlines(), ["BASES DE DATOS (1)", "CMS (1)", "SEO (1)"])

    def test_count(self) -> None:
        code, text = _run(["--file", str(self.path), "count", "cms"])
        self.assertEqual(code, 0)
        self.assertEqual(text.strip(), "CMS: 1")

        code, text = _run(["--file", str(self.path), "count", "nope"])
        self.assertEqual(code, 1)
        self.assertIn("Category not found: NOPE", text)

    def test_count_empty_category(self) -> None:
        # a line starting with ":" puts the course in the "" category
        self.path.write_text(SAMPLE + ":no category course:01/01/2020:principiante\n", encoding="utf-8")
        code, text = _run(["--file", str(self.path), "count", ""])
        self.assertEqual(code, 0)
        self.assertEqual(text.strip(), ": 1")

    def test_oldest(self) -> None:
        code, text = _run(["-f", str(self.path), "oldest"])
        self.assertEqual(code, 0)
        self.assertEqual(text.strip(), "Curso más antiguo: Wordpress Plugin Development")

    def test_delete(self) -> None:
        code, text = _run(["--file", str(self.path), "delete", "CMS", "intermedio"])
        self.assertEqual(code, 0)
        self.assertIn("Borrados = [Seo Avanzado, Wordpress Plugin Development]", text)
        self.assertIn("SEO (0)", text)
        self.assertIn("BASES DE DATOS (1)", text)

    def test_delete_unknown_category(self) -> None:
        code, text = _run(["--file", str(self.path), "delete", "nope", "avanzado"])
        self.assertEqual(code, 1)
        self.assertIn("Category not found", text)

    def test_delete_invalid_level_is_usage_error(self) -> None:
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            main(["--file", str(self.path), "delete", "cms", "experto"])
        self.assertEqual(ctx.exception.code, 2)

    def test_show(self) -> None:
        code, text = _run(["--file", str(self.path), "show"])
        self.assertEqual(code, 0)
        self.assertIn("Publicado desde: 30 noviembre 2011", text)


class TestCLIErrors(unittest.TestCase):
    def test_file_that_is_not_utf8(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "latin1.txt"
            p.write_bytes(b"\xff\xfe cms:a:01/01/2020:principiante\n")
            code, text = _run(["--file", str(p), "show"])
        self.assertEqual(code, 1)
        self.assertIn("Cannot read catalog file", text)

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            code, text = _run(["--file", str(Path(d) / "missing.txt"), "show"])
        self.assertEqual(code, 1)
        self.assertIn("Cannot read catalog file", text)

    def test_malformed_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "bad.txt"
            p.write_text("cms:a:01/01/2020:principiante\ncms:b:not-a-date:principiante\n", encoding="utf-8")
            code, text = _run(["--file", str(p), "show"])
        self.assertEqual(code, 1)
        self.assertIn("Invalid catalog file: line 2", text)


if __name__ == "__main__":
    unittest.main()
