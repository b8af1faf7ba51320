import unittest

from core.hierarchy import OutlineEntry, TableRow, SECTION_GROUP, SECTION_ITEM
from core.markdown_io import to_markdown, parse_markdown
from core.csv_io import HEADER, to_csv, parse_csv


class TestMarkdown(unittest.TestCase):
    def test_render(self):
        text = to_markdown([
            OutlineEntry("Fruits", is_group=True,
                         children=[OutlineEntry("apple", "red"), OutlineEntry("")]),
            OutlineEntry("", is_group=True),
            OutlineEntry("loose"),
        ])
        self.assertEqual(text, (
            "## Fruits\n\n"
            "### apple\n---\nred\n\n"
            "### (Empty Note)\n\n"
            "## (Empty Pin)\n\n"
            "### loose"
        ))

    def test_parse_headings_and_bodies(self):
        sections = parse_markdown(
            "preamble is dropped\n"
            "## Fruits\n"
            "\n"
            "### apple\n"
            "---\n"
            "red\n"
            "#### still body\n"
            "\n"
            "##not-a-heading\n"
            "### kiwi\n"
        )
        self.assertEqual([(s.kind, s.title) for s in sections], [
            (SECTION_GROUP, "Fruits"),
            (SECTION_ITEM, "apple"),
            (SECTION_ITEM, "kiwi"),
        ])
        self.assertEqual(sections[0].body, "")
        self.assertEqual(sections[1].content,
                         "apple\n---\nred\n#### still body\n\n##not-a-heading")

    def test_bare_heading_marker(self):
        sections = parse_markdown("##\n###")
        self.assertEqual([(s.kind, s.title) for s in sections],
                         [(SECTION_GROUP, ""), (SECTION_ITEM, "")])

    def test_empty_text(self):
        self.assertEqual(parse_markdown(""), [])
        self.assertEqual(parse_markdown("no headings at all"), [])


class TestCsv(unittest.TestCase):
    def test_render_escapes_newlines(self):
        text = to_csv([
            TableRow("Animals", "cat", "meows\nand purrs"),
            TableRow("", "a, b", ""),
        ])
        lines = text.split("\n")
        self.assertEqual(lines[0], ",".join(HEADER))
        self.assertEqual(lines[1], "Animals,cat,meows\\nand purrs")
        self.assertEqual(lines[2], ',"a, b",')
        self.assertEqual(len(lines), 3)

    def test_parse_round_trip(self):
        rows = [
            TableRow("Animals", "cat", "meows\nand purrs"),
            TableRow("", "a, b", "quote \"x\""),
        ]
        self.assertEqual(parse_csv(to_csv(rows)), rows)

    def test_parse_requires_header_and_row(self):
        self.assertEqual(parse_csv(""), [])
        self.assertEqual(parse_csv("category,word,definition\n"), [])

    def test_parse_pads_short_rows_and_skips_blank_lines(self):
        rows = parse_csv("category,word,definition\n\nOnly\n , word \n")
        self.assertEqual(rows, [TableRow("Only", "", ""), TableRow("", "word", "")])


if __name__ == "__main__":
    unittest.main(verbosity=2)
