import unittest

from advising.data import CourseCatalog
from advising.models import Course


class TestCourseCatalog(unittest.TestCase):
    def setUp(self):
        self.catalog = CourseCatalog()
        self.catalog.upsert(Course("CSCI200", "Data Structures", ["CSCI101"]))
        self.catalog.upsert(Course("CSCI100", "Intro to CS"))
        self.catalog.upsert(Course("MATH201", "Discrete Mathematics"))

    def test_new_catalog_is_empty(self):
        catalog = CourseCatalog()
        self.assertTrue(catalog.is_empty())
        self.assertEqual(len(catalog), 0)
        self.assertEqual(catalog.sorted_numbers(), [])

    def test_get_is_case_insensitive(self):
        for number in ("CSCI100", "csci100", "CsCi100"):
            course = self.catalog.get(number)
            self.assertIsNotNone(course)
            self.assertEqual(course.title, "Intro to CS")

    def test_get_missing_returns_none(self):
        self.assertIsNone(self.catalog.get("CSCI999"))
        self.assertIsNone(self.catalog.get("csci999"))
        self.assertEqual(len(self.catalog), 3)

    def test_contains(self):
        self.assertTrue(self.catalog.contains("math201"))
        self.assertIn("Math201", self.catalog)
        self.assertFalse(self.catalog.contains("MATH999"))
        self.assertNotIn(42, self.catalog)

    def test_upsert_last_write_wins(self):
        self.catalog.upsert(Course("CSCI100", "Computer Science Basics"))
        self.assertEqual(len(self.catalog), 3)
        self.assertEqual(self.catalog.get("CSCI100").title, "Computer Science Basics")

    def test_upsert_keys_by_uppercased_number(self):
        catalog = CourseCatalog()
        catalog.upsert(Course("csci101", "Foo"))
        self.assertEqual(catalog.sorted_numbers(), ["CSCI101"])
        self.assertEqual(catalog.get("CSCI101").title, "Foo")

    def test_sorted_numbers(self):
        numbers = self.catalog.sorted_numbers()
        self.assertEqual(numbers, ["CSCI100", "CSCI200", "MATH201"])
        self.assertEqual(numbers, self.catalog.sorted_numbers())
        self.assertEqual(len(numbers), len(set(numbers)))

    def test_iterates_in_sorted_order(self):
        self.assertEqual([c.number for c in self.catalog], ["CSCI100", "CSCI200", "MATH201"])

    def test_clear(self):
        self.catalog.clear()
        self.assertTrue(self.catalog.is_empty())
        self.assertIsNone(self.catalog.get("CSCI100"))


if __name__ == "__main__":
    unittest.main()
