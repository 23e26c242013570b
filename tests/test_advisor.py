import io
import shutil
import tempfile
import unittest
from pathlib import Path

from advising import AdvisingAssistant, TerminalDisplay
from advising.errors import OpenError, ParseError, InvalidDataError


class AdvisorTestCase(unittest.TestCase):
    def setUp(self):
        self.tmpdir = Path(tempfile.mkdtemp())
        self.addCleanup(shutil.rmtree, self.tmpdir)
        self.out = io.StringIO()
        self.assistant = AdvisingAssistant(display=TerminalDisplay(self.out))

    def _write(self, name, text):
        path = self.tmpdir / name
        path.write_text(text, encoding="utf-8")
        return path


class TestLoadData(AdvisorTestCase):
    def test_starts_empty(self):
        self.assertFalse(self.assistant.has_data())
        self.assertTrue(self.assistant.catalog.is_empty())

    def test_successful_load_replaces_catalog(self):
        first = self._write("a.csv", "CSCI100,Intro to CS\n")
        second = self._write("b.csv", "MATH201,Discrete Mathematics\nMATH202,Linear Algebra\n")

        self.assertEqual(self.assistant.load_data(first), 1)
        self.assertEqual(self.assistant.load_data(second), 2)
        self.assertIsNone(self.assistant.find_course("CSCI100"))
        self.assertEqual(self.assistant.find_course("math202").title, "Linear Algebra")

    def test_failed_load_keeps_empty_catalog(self):
        bad = self._write("bad.csv", "CSCI100\n")
        with self.assertRaises(ParseError):
            self.assistant.load_data(bad)
        self.assertTrue(self.assistant.catalog.is_empty())

    def test_failed_load_keeps_previous_catalog(self):
        good = self._write("good.csv", "CSCI100,Intro to CS\nCSCI101,Intro to Programming,CSCI100\n")
        self.assistant.load_data(good)
        before = self.assistant.catalog

        for name, text, error in (
            ("one_field.csv", "MATH201,Discrete Mathematics\nMATH202\n", ParseError),
            ("empty_line_field.csv", "MATH201,Discrete Mathematics\n,\n", InvalidDataError),
        ):
            with self.assertRaises(error):
                self.assistant.load_data(self._write(name, text))

        with self.assertRaises(OpenError):
            self.assistant.load_data(self.tmpdir / "missing.csv")

        self.assertIs(self.assistant.catalog, before)
        self.assertEqual(self.assistant.catalog.sorted_numbers(), ["CSCI100", "CSCI101"])
        self.assertIsNone(self.assistant.find_course("MATH201"))

    def test_empty_file_loads_but_counts_as_no_data(self):
        path = self._write("empty.csv", "\n\n")
        self.assertEqual(self.assistant.load_data(path), 0)
        self.assertFalse(self.assistant.has_data())


class TestPrinting(AdvisorTestCase):
    def setUp(self):
        super().setUp()
        self.path = self._write(
            "courses.csv",
            "CSCI200,Data Structures,CSCI101,MATH201\n"
            "CSCI100,Intro to CS\n"
            "CSCI101,Intro to Programming,CSCI100\n",
        )

    def test_list_before_load(self):
        self.assistant.print_course_list()
        self.assertEqual(self.out.getvalue(), "Please load the data structure first (option 1).\n\n")

    def test_course_before_load(self):
        self.assistant.print_course("CSCI100")
        self.assertEqual(self.out.getvalue(), "Please load the data structure first (option 1).\n\n")

    def test_list_sorted(self):
        self.assistant.load_data(self.path)
        self.assistant.print_course_list()
        self.assertEqual(
            self.out.getvalue(),
            "Here is a sample schedule:\n"
            "CSCI100, Intro to CS\n"
            "CSCI101, Intro to Programming\n"
            "CSCI200, Data Structures\n"
            "\n",
        )

    def test_course_with_unresolved_prerequisite(self):
        self.assistant.load_data(self.path)
        self.assistant.print_course("csci200")
        self.assertEqual(
            self.out.getvalue(),
            "CSCI200, Data Structures\nPrerequisites: CSCI101, MATH201\n\n",
        )

    def test_course_without_prerequisites(self):
        self.assistant.load_data(self.path)
        self.assistant.print_course("CsCi100")
        self.assertEqual(self.out.getvalue(), "CSCI100, Intro to CS\nPrerequisites: None\n\n")

    def test_course_not_found_uses_uppercased_number(self):
        self.assistant.load_data(self.path)
        self.assistant.print_course("math201")
        self.assertEqual(self.out.getvalue(), "MATH201 was not found.\n\n")
        self.assertEqual(len(self.assistant.catalog), 3)


if __name__ == "__main__":
    unittest.main()
