import unittest

from redline.errors import PatternError
from redline.matcher import find_occurrences


class MatcherTests(unittest.TestCase):
    def test_literal_matches_do_not_overlap(self):
        occurrences = find_occurrences("aaaa", "aa")
        self.assertEqual([(o.start, o.end) for o in occurrences], [(0, 2), (2, 4)])

    def test_literal_is_case_sensitive_by_default(self):
        occurrences = find_occurrences("Test test TEST tEsT", "test")
        self.assertEqual(len(occurrences), 1)
        self.assertEqual(occurrences[0].start, 5)

    def test_literal_case_insensitive(self):
        occurrences = find_occurrences("Test test TEST tEsT", "test", case_sensitive=False)
        self.assertEqual([o.text for o in occurrences], ["Test", "test", "TEST", "tEsT"])

    def test_literal_treats_regex_metacharacters_verbatim(self):
        occurrences = find_occurrences("a.b axb a.b", "a.b")
        self.assertEqual([o.start for o in occurrences], [0, 8])
        self.assertEqual(occurrences[0].groups, ())

    def test_line_numbers_are_one_based(self):
        occurrences = find_occurrences("x\ny\nx y\n\nx", "x")
        self.assertEqual([o.line for o in occurrences], [1, 3, 5])

    def test_multiline_match_records_end_line(self):
        occurrences = find_occurrences("a\nb\nc", "a\nb")
        self.assertEqual((occurrences[0].line, occurrences[0].end_line), (1, 2))

    def test_regex_anchors_match_every_line(self):
        occurrences = find_occurrences("Line 1\nLine 2\nLine 3", "^Line", use_regex=True)
        self.assertEqual([o.line for o in occurrences], [1, 2, 3])

    def test_regex_anchors_whole_text_when_multiline_is_off(self):
        occurrences = find_occurrences("Line 1\nLine 2", "^Line", use_regex=True, multiline=False)
        self.assertEqual(len(occurrences), 1)

    def test_regex_captures_groups(self):
        occurrences = find_occurrences("John Doe", r"(?P<first>\w+) (\w+)", use_regex=True)
        self.assertEqual(occurrences[0].groups, ("John", "Doe"))
        self.assertEqual(occurrences[0].named_groups, {"first": "John"})

    def test_dotnet_named_group_syntax_is_accepted(self):
        occurrences = find_occurrences("ab ab", r"(?<first>a)b \k<first>", use_regex=True)
        self.assertEqual(occurrences[0].named_groups, {"first": "a"})

    def test_lookbehind_is_not_mistaken_for_named_group(self):
        occurrences = find_occurrences("xa ya", r"(?<=y)a|(?<!\w)x", use_regex=True)
        self.assertEqual([o.start for o in occurrences], [0, 4])

    def test_regex_case_insensitive_flag(self):
        occurrences = find_occurrences("Foo foo FOO", r"f\w+", use_regex=True, case_sensitive=False)
        self.assertEqual(len(occurrences), 3)

    def test_invalid_regex_raises_pattern_error(self):
        with self.assertRaises(PatternError) as ctx:
            find_occurrences("text", "(unclosed", use_regex=True)
        self.assertIn("missing )", ctx.exception.message)

    def test_unicode_offsets_are_codepoints(self):
        occurrences = find_occurrences("Hello 世界!", "世界")
        self.assertEqual((occurrences[0].start, occurrences[0].length), (6, 2))


if __name__ == "__main__":
    unittest.main()
