import os
import unittest

from emoji_lookup import EmojiRecord, Status
from tools.generate_emoji import (
    ParseError,
    parse_codepoints,
    parse_emoji_test,
    parse_line,
    parse_status,
)

SAMPLE = os.path.join(os.path.dirname(__file__), "data", "emoji-test-sample.txt")


def data_line(codepoints, status, comment, status_width=20):
    return f"{codepoints:<55}; {status:<{status_width}}# {comment}"


class TestParseCodepoints(unittest.TestCase):
    def test_single(self):
        self.assertEqual(parse_codepoints("1F60E"), "\U0001F60E")

    def test_sequence_with_padding(self):
        self.assertEqual(parse_codepoints("263A FE0F      "), "☺\ufe0f")

    def test_lowercase(self):
        self.assertEqual(parse_codepoints("1f3fb"), "\U0001F3FB")

    def test_malformed(self):
        for text in ["1F60G", "", "0x263A", "-1", "263A  FE0F", "1_F60E"]:
            with self.subTest(text=text):
                with self.assertRaises(ParseError):
                    parse_codepoints(text)

    def test_not_scalar_value(self):
        for text in ["D800", "DFFF", "110000"]:
            with self.subTest(text=text):
                with self.assertRaises(ParseError):
                    parse_codepoints(text)


class TestParseStatus(unittest.TestCase):
    def test_known(self):
        self.assertEqual(parse_status("component           "), Status.COMPONENT)
        self.assertEqual(parse_status("fully-qualified     "), Status.FULLY_QUALIFIED)
        self.assertEqual(parse_status("minimally-qualified "), Status.MINIMALLY_QUALIFIED)
        self.assertEqual(parse_status("unqualified"), Status.UNQUALIFIED)

    def test_unknown(self):
        with self.assertRaises(ParseError) as cm:
            parse_status("qualified")
        self.assertIn("'qualified'", str(cm.exception))


class TestParseLine(unittest.TestCase):
    def test_fully_qualified(self):
        line = data_line("1F60E", "fully-qualified", "😎 E1.0 smiling face with sunglasses")
        record = parse_line(line, "Smileys & Emotion", "face-glasses")

        self.assertEqual(record, EmojiRecord(
            "😎", "smiling face with sunglasses", Status.FULLY_QUALIFIED,
            "1.0", "", "Smileys & Emotion", "face-glasses"))

    def test_multi_codepoint(self):
        line = data_line("1F469 1F3FB 200D 2764 200D 1F48B 200D 1F469 1F3FB",
                         "minimally-qualified",
                         "👩🏻\u200d❤\u200d💋\u200d👩🏻 E13.1 kiss: woman, woman, light skin tone")
        record = parse_line(line)

        self.assertEqual(len(record.sequence), 9)
        self.assertEqual(record.status, Status.MINIMALLY_QUALIFIED)
        self.assertEqual(record.introduced, "13.1")
        self.assertEqual(record.name, "kiss: woman, woman, light skin tone")
        self.assertEqual(record.fully_qualifies_as, "")

    def test_name_with_punctuation(self):
        line = data_line("1F1E8 1F1EE", "fully-qualified", "🇨🇮 E2.0 flag: Côte d’Ivoire")
        self.assertEqual(parse_line(line).name, "flag: Côte d’Ivoire")

    def test_unknown_status(self):
        line = data_line("1F60E", "half-qualified", "😎 E1.0 smiling face with sunglasses")
        with self.assertRaises(ParseError):
            parse_line(line)

    def test_missing_name(self):
        line = data_line("1F60E", "fully-qualified", "😎 E1.0")
        with self.assertRaises(ParseError) as cm:
            parse_line(line)
        self.assertIn("missing space", cm.exception.reason)

    def test_empty_name(self):
        line = data_line("1F60E", "fully-qualified", "😎 E1.0 ")
        with self.assertRaises(ParseError):
            parse_line(line)

    def test_version_without_prefix(self):
        line = data_line("1F60E", "fully-qualified", "😎 1.0 smiling face with sunglasses")
        with self.assertRaises(ParseError):
            parse_line(line)

    def test_too_short(self):
        with self.assertRaises(ParseError):
            parse_line("1F60E ; fully-qualified # 😎 E1.0 smiling face with sunglasses")

    def test_codepoints_overflow_status_column(self):
        line = "1F60E " * 10 + "; fully-qualified     # 😎 E1.0 smiling face with sunglasses"
        with self.assertRaises(ParseError):
            parse_line(line)

    def test_shifted_comment_column(self):
        # Status padded one column less than expected
        line = data_line("1F60E", "fully-qualified", "😎 E1.0 smiling face with sunglasses",
                         status_width=19)
        with self.assertRaises(ParseError):
            parse_line(line)

    def test_rendered_emoji_mismatch(self):
        line = data_line("1F60E", "fully-qualified", "😀 E1.0 smiling face with sunglasses")
        with self.assertRaises(ParseError) as cm:
            parse_line(line)
        self.assertIn("does not match", cm.exception.reason)

    def test_column_override(self):
        line = data_line("1F60E", "fully-qualified", "😎 E1.0 smiling face with sunglasses",
                         status_width=19)
        record = parse_line(line, comment_column=76)

        self.assertEqual(record.sequence, "😎")
        self.assertEqual(record.introduced, "1.0")


class TestParseEmojiTest(unittest.TestCase):
    def setUp(self):
        with open(SAMPLE, encoding="utf-8") as f:
            self.test = parse_emoji_test(f)
        self.table = {r.sequence: r for r in self.test.records}

    def test_header(self):
        self.assertEqual(self.test.version, "15.1")
        self.assertEqual(self.test.declared_counts, {
            Status.FULLY_QUALIFIED: 5,
            Status.MINIMALLY_QUALIFIED: 2,
            Status.UNQUALIFIED: 2,
            Status.COMPONENT: 1,
        })

    def test_records_in_file_order(self):
        self.assertEqual(len(self.test.records), 10)
        self.assertEqual(self.test.records[0].sequence, "☺\ufe0f")
        self.assertEqual(self.test.records[-1].sequence, "\U0001F642\u200d↔")

    def test_fully_qualified_links_itself(self):
        record = self.table["😎"]
        self.assertEqual(record.fully_qualifies_as, "😎")

    def test_unqualified_links_fully_qualified(self):
        self.assertEqual(self.table["☺"].fully_qualifies_as, "☺\ufe0f")
        self.assertEqual(self.table["\U0001F590"].fully_qualifies_as, "\U0001F590\ufe0f")

    def test_minimally_qualified_links_fully_qualified(self):
        record = self.table["\U0001F64B\u200d♀"]
        self.assertEqual(record.status, Status.MINIMALLY_QUALIFIED)
        self.assertEqual(record.fully_qualifies_as, "\U0001F64B\u200d♀\ufe0f")

    def test_component_not_linked(self):
        record = self.table["\U0001F3FB"]
        self.assertEqual(record.status, Status.COMPONENT)
        self.assertEqual(record.fully_qualifies_as, "")

    def test_groups(self):
        self.assertEqual(self.table["😎"].group, "Smileys & Emotion")
        self.assertEqual(self.table["😎"].subgroup, "face-glasses")
        self.assertEqual(self.table["\U0001F3FB"].group, "Component")
        self.assertEqual(self.table["\U0001F3FB"].subgroup, "skin-tone")
        # Group headings reset the subgroup and can repeat
        self.assertEqual(self.table["\U0001F642\u200d↔"].group, "Smileys & Emotion")
        self.assertEqual(self.table["\U0001F642\u200d↔"].subgroup, "face-unwell")

    def test_no_fully_qualified_form(self):
        lines = [data_line("263A", "unqualified", "☺ E0.6 smiling face")]
        test = parse_emoji_test(lines)
        self.assertEqual(test.records[0].fully_qualifies_as, "")

    def test_last_fully_qualified_wins(self):
        lines = [
            data_line("263A FE0F", "fully-qualified", "☺\ufe0f E0.6 smiling face"),
            data_line("263A", "unqualified", "☺ E0.6 smiling face"),
            data_line("1F60A", "fully-qualified", "😊 E0.6 smiling face"),
        ]
        with self.assertLogs("emoji_lookup.generate", level="WARNING") as cm:
            test = parse_emoji_test(lines)

        self.assertIn("smiling face", cm.output[0])
        self.assertTrue(all(r.fully_qualifies_as == "😊" for r in test.records))

    def test_comments_and_blank_lines(self):
        lines = [
            "# comment\n",
            "\n",
            "   \n",
            "   # indented comment\n",
            data_line("1F60E", "fully-qualified", "😎 E1.0 smiling face with sunglasses") + "\r\n",
        ]
        test = parse_emoji_test(lines)

        self.assertIsNone(test.version)
        self.assertEqual(len(test.records), 1)
        self.assertEqual(test.records[0].name, "smiling face with sunglasses")

    def test_error_reports_line(self):
        bad = data_line("1F60E", "fully-qualified", "😎 E1.0")
        lines = ["# Version: 15.1", "", bad]
        with self.assertRaises(ParseError) as cm:
            parse_emoji_test(lines)

        self.assertEqual(cm.exception.lineno, 3)
        self.assertEqual(cm.exception.line, bad)
        self.assertTrue(str(cm.exception).startswith("line 3: "))

    def test_duplicate_sequence(self):
        line = data_line("1F60E", "fully-qualified", "😎 E1.0 smiling face with sunglasses")
        with self.assertRaises(ParseError) as cm:
            parse_emoji_test([line, line])
        self.assertEqual(cm.exception.lineno, 2)

    def test_column_override(self):
        lines = [data_line("1F60E", "fully-qualified", "😎 E1.0 smiling face with sunglasses",
                           status_width=19)]
        with self.assertRaises(ParseError):
            parse_emoji_test(lines)

        test = parse_emoji_test(lines, comment_column=76)
        self.assertEqual(test.records[0].fully_qualifies_as, "😎")


if __name__ == "__main__":
    unittest.main()
