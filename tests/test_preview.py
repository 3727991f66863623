import unittest

from redline.matcher import find_occurrences
from redline.preview import build_preview, group_occurrences

SAMPLE = "Line1\nLine2abc\nLine3\nLine4\nLine5abc\nLine6\n"


def preview(text, pattern, template, preview_lines=3, max_replacements=-1, use_regex=False):
    occurrences = find_occurrences(text, pattern, use_regex=use_regex)
    return build_preview(text, occurrences, template, preview_lines, max_replacements, use_regex)


class GroupingTests(unittest.TestCase):
    def test_adjacent_lines_share_a_group(self):
        occurrences = find_occurrences("abc\nabc\nx\nx\nabc abc", "abc")
        groups = group_occurrences(occurrences)
        self.assertEqual([(g.start_line, g.end_line, len(g.occurrences)) for g in groups], [(1, 2, 2), (5, 5, 2)])

    def test_gap_of_one_line_splits_groups(self):
        groups = group_occurrences(find_occurrences("a\nx\na", "a"))
        self.assertEqual(len(groups), 2)


class PreviewBuilderTests(unittest.TestCase):
    def test_renders_before_and_after_per_group(self):
        report = preview(SAMPLE, "abc", "XYZ")
        self.assertEqual(report.total_groups, 2)
        self.assertEqual(report.total_occurrences, 2)
        self.assertFalse(report.truncated)
        self.assertEqual([g.before for g in report.groups], ["Line2abc", "Line5abc"])
        self.assertEqual([g.after for g in report.groups], ["Line2XYZ", "Line5XYZ"])

    def test_truncates_to_preview_lines_but_reports_totals(self):
        report = preview(SAMPLE, "abc", "XYZ", preview_lines=1)
        self.assertEqual(len(report.groups), 1)
        self.assertEqual(report.total_groups, 2)
        self.assertTrue(report.truncated)
        self.assertEqual(report.groups[0].start_line, 2)

    def test_more_preview_lines_only_appends_groups(self):
        one = preview(SAMPLE, "abc", "XYZ", preview_lines=1)
        two = preview(SAMPLE, "abc", "XYZ", preview_lines=2)
        self.assertEqual(two.groups[0].to_dict(), one.groups[0].to_dict())
        self.assertEqual(two.groups[1].start_line, 5)

    def test_zero_preview_lines_shows_nothing(self):
        report = preview(SAMPLE, "abc", "XYZ", preview_lines=0)
        self.assertEqual(report.groups, [])
        self.assertEqual(report.total_groups, 2)

    def test_preview_honours_max_replacements(self):
        report = preview(SAMPLE, "abc", "XYZ", max_replacements=1)
        self.assertEqual(report.total_groups, 1)
        self.assertEqual(report.total_occurrences, 1)

    def test_multi_line_group_applies_only_its_replacements(self):
        report = preview("a1\na2\nb\nb\na3", "a", "Z")
        self.assertEqual(report.groups[0].before, "a1\na2")
        self.assertEqual(report.groups[0].after, "Z1\nZ2")
        self.assertEqual(report.groups[1].after, "Z3")

    def test_regex_groups_are_expanded_in_after_snippet(self):
        report = preview("name: John Doe\n", r"(\w+) (\w+)$", "$2, $1", use_regex=True)
        self.assertEqual(report.groups[0].after, "name: Doe, John")

    def test_zero_width_match_at_end_of_text(self):
        report = preview("a\n", "$", "!", use_regex=True)
        self.assertEqual(report.total_occurrences, 2)
        self.assertEqual(report.groups[0].after, "a!\n!")


if __name__ == "__main__":
    unittest.main()
