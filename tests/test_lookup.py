import os
import unittest
from collections import Counter

import emoji_lookup
from emoji_lookup import EMOJI_TABLE, EMPTY_RECORD, VERSION, Status, is_emoji, lookup
from tools.generate_emoji import parse_emoji_test

DATA = os.path.join(os.path.dirname(__file__), os.pardir, "data", VERSION, "emoji-test.txt")


class TestLookup(unittest.TestCase):
    def test_ascii_is_not_emoji(self):
        self.assertEqual(lookup("a"), (EMPTY_RECORD, False))

    def test_fully_qualified(self):
        record, ok = lookup("\U0001F60E")

        self.assertTrue(ok)
        self.assertEqual(record.sequence, "\U0001F60E")
        self.assertEqual(record.name, "smiling face with sunglasses")
        self.assertEqual(record.status, Status.FULLY_QUALIFIED)
        self.assertEqual(record.introduced, "1.0")
        self.assertEqual(record.fully_qualifies_as, "\U0001F60E")

    def test_unqualified(self):
        record, ok = lookup("☺")

        self.assertTrue(ok)
        self.assertEqual(record.status, Status.UNQUALIFIED)
        self.assertEqual(record.fully_qualifies_as, "☺\ufe0f")
        self.assertEqual([hex(ord(c)) for c in record.fully_qualifies_as],
                         ["0x263a", "0xfe0f"])

    def test_follow_fully_qualifies_as(self):
        unqualified, _ = lookup("☺")
        record, ok = lookup(unqualified.fully_qualifies_as)

        self.assertTrue(ok)
        self.assertEqual(record.status, Status.FULLY_QUALIFIED)
        self.assertEqual(record.name, "smiling face")

    def test_minimally_qualified(self):
        record, ok = lookup("\U0001F64B\u200d♀")

        self.assertTrue(ok)
        self.assertEqual(record.status, Status.MINIMALLY_QUALIFIED)
        self.assertEqual(record.name, "woman raising hand")
        self.assertEqual(record.fully_qualifies_as, "\U0001F64B\u200d♀\ufe0f")

    def test_component(self):
        record, ok = lookup("\U0001F3FB")

        self.assertTrue(ok)
        self.assertEqual(record.status, Status.COMPONENT)
        self.assertEqual(record.name, "light skin tone")
        self.assertEqual(record.fully_qualifies_as, "")
        self.assertEqual(record.group, "Component")

    def test_multiple_emojis(self):
        self.assertEqual(lookup("\U0001F60E\U0001F60E"), (EMPTY_RECORD, False))

    def test_empty(self):
        self.assertEqual(lookup(""), (EMPTY_RECORD, False))

    def test_no_normalization(self):
        # Trailing whitespace or a text presentation selector is not stripped
        self.assertFalse(lookup("\U0001F60E ")[1])
        self.assertFalse(lookup("\U0001F60E\ufe0e")[1])

    def test_miss_record_is_zero(self):
        record, ok = lookup("not an emoji")

        self.assertFalse(ok)
        self.assertEqual(record.sequence, "")
        self.assertEqual(record.name, "")
        self.assertEqual(record.introduced, "")
        self.assertEqual(record.fully_qualifies_as, "")
        self.assertEqual(record.status, Status.COMPONENT)
        self.assertEqual(int(record.status), 0)

    def test_is_emoji(self):
        self.assertTrue(is_emoji("\U0001F60E"))
        self.assertTrue(is_emoji("☺"))
        self.assertFalse(is_emoji("a"))
        self.assertFalse(is_emoji(""))

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            EMOJI_TABLE["a"] = EMPTY_RECORD

    def test_exports(self):
        for name in emoji_lookup.__all__:
            self.assertTrue(hasattr(emoji_lookup, name), name)


class TestTableProperties(unittest.TestCase):
    def test_keys_are_sequences(self):
        for sequence, record in EMOJI_TABLE.items():
            self.assertEqual(sequence, record.sequence)

    def test_scalar_values_only(self):
        for sequence in EMOJI_TABLE:
            self.assertTrue(sequence)
            for c in sequence:
                self.assertFalse(0xD800 <= ord(c) <= 0xDFFF, ascii(sequence))

    def test_fully_qualified_references_itself(self):
        for record in EMOJI_TABLE.values():
            if record.status == Status.FULLY_QUALIFIED:
                self.assertEqual(record.fully_qualifies_as, record.sequence)
                self.assertEqual(lookup(record.fully_qualifies_as)[0].sequence,
                                 record.sequence)

    def test_fully_qualifies_as_is_canonical(self):
        for record in EMOJI_TABLE.values():
            if not record.fully_qualifies_as:
                continue
            target, ok = lookup(record.fully_qualifies_as)
            self.assertTrue(ok, record)
            self.assertEqual(target.status, Status.FULLY_QUALIFIED)
            self.assertEqual(target.name, record.name)

    def test_components_not_linked(self):
        components = [r for r in EMOJI_TABLE.values() if r.status == Status.COMPONENT]
        self.assertTrue(components)
        for record in components:
            self.assertEqual(record.fully_qualifies_as, "")

    def test_one_fully_qualified_per_name(self):
        names = Counter(r.name for r in EMOJI_TABLE.values()
                        if r.status == Status.FULLY_QUALIFIED)
        self.assertEqual(sum(names.values()), len(names))

    def test_version_agreement(self):
        self.assertTrue(any(r.introduced == VERSION for r in EMOJI_TABLE.values()))


class TestTableMatchesData(unittest.TestCase):
    def test_regenerated_table_matches(self):
        with open(DATA, encoding="utf-8") as f:
            test = parse_emoji_test(f)

        self.assertEqual(test.version, VERSION)
        self.assertEqual(len(test.records), len(EMOJI_TABLE))
        for record in test.records:
            self.assertEqual(EMOJI_TABLE[record.sequence], record)

        counts = Counter(r.status for r in test.records)
        for status, declared in test.declared_counts.items():
            self.assertEqual(counts[status], declared)


if __name__ == "__main__":
    unittest.main()
