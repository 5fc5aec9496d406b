import io
import os
import shutil
import stat
import subprocess
import sys
import tempfile
import unittest
import urllib.error
from unittest import mock

from emoji_lookup import EmojiRecord, Status
from tools import generate_emoji
from tools.generate_emoji import GenerateError, ParseError, generate, main, render_table

SAMPLE = os.path.join(os.path.dirname(__file__), "data", "emoji-test-sample.txt")
ROOT = os.path.join(os.path.dirname(__file__), os.pardir)


def load_table(path):
    """Execute a generated module as if it lived in emoji_lookup"""
    with open(path, encoding="ascii") as f:
        source = f.read()
    namespace = {"__name__": "emoji_lookup._generated", "__package__": "emoji_lookup"}
    exec(compile(source, path, "exec"), namespace)
    return namespace


class GeneratorTestCase(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.out = os.path.join(self.tmpdir, "emoji_data.py")

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def write_data(self, text, name="emoji-test.txt"):
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path


class TestMain(GeneratorTestCase):
    def test_generates_table(self):
        self.assertEqual(main(["--data", SAMPLE, "--out", self.out]), 0)

        module = load_table(self.out)
        table = module["EMOJI_TABLE"]
        self.assertEqual(module["VERSION"], "15.1")
        self.assertEqual(len(table), 10)
        self.assertEqual(table["\U0001F60E"], EmojiRecord(
            "\U0001F60E", "smiling face with sunglasses", Status.FULLY_QUALIFIED,
            "1.0", "\U0001F60E", "Smileys & Emotion", "face-glasses"))
        self.assertEqual(table["☺"].status, Status.UNQUALIFIED)
        self.assertEqual(table["☺"].fully_qualifies_as, "☺\ufe0f")

    def test_output_is_ascii(self):
        main(["--data", SAMPLE, "--out", self.out])
        with open(self.out, "rb") as f:
            f.read().decode("ascii")

    def test_no_temporary_files_left(self):
        main(["--data", SAMPLE, "--out", self.out])
        self.assertEqual(os.listdir(self.tmpdir), ["emoji_data.py"])

    @unittest.skipUnless(os.name == "posix", "POSIX permissions")
    def test_keeps_output_mode(self):
        with open(self.out, "w", encoding="utf-8") as f:
            f.write("# previous\n")
        os.chmod(self.out, 0o600)

        self.assertEqual(main(["--data", SAMPLE, "--out", self.out]), 0)
        self.assertEqual(stat.S_IMODE(os.stat(self.out).st_mode), 0o600)

    @unittest.skipUnless(os.name == "posix", "POSIX permissions")
    def test_new_output_follows_umask(self):
        umask = os.umask(0o027)
        try:
            self.assertEqual(main(["--data", SAMPLE, "--out", self.out]), 0)
        finally:
            os.umask(umask)
        self.assertEqual(stat.S_IMODE(os.stat(self.out).st_mode), 0o640)

    def test_version_override(self):
        self.assertEqual(main(["--data", SAMPLE, "--out", self.out,
                               "--emoji-version", "4.0"]), 0)
        self.assertEqual(load_table(self.out)["VERSION"], "4.0")

    def test_version_without_entries(self):
        with self.assertLogs("emoji_lookup.generate", level="ERROR") as cm:
            self.assertEqual(main(["--data", SAMPLE, "--out", self.out,
                                   "--emoji-version", "99.0"]), 1)

        self.assertIn("Unicode Emoji 99.0", cm.output[-1])
        self.assertFalse(os.path.exists(self.out))

    def test_missing_version(self):
        with open(SAMPLE, encoding="utf-8") as f:
            text = f.read().replace("# Version: 15.1\n", "")
        data = self.write_data(text)

        with self.assertLogs("emoji_lookup.generate", level="ERROR"):
            self.assertEqual(main(["--data", data, "--out", self.out]), 1)
        self.assertFalse(os.path.exists(self.out))

    def test_missing_input(self):
        missing = os.path.join(self.tmpdir, "nope.txt")
        with self.assertLogs("emoji_lookup.generate", level="ERROR"):
            self.assertEqual(main(["--data", missing, "--out", self.out]), 1)
        self.assertFalse(os.path.exists(self.out))

    def test_unwritable_output(self):
        out = os.path.join(self.tmpdir, "missing-dir", "emoji_data.py")
        with self.assertLogs("emoji_lookup.generate", level="ERROR"):
            self.assertEqual(main(["--data", SAMPLE, "--out", out]), 1)

    def test_parse_error_keeps_previous_output(self):
        with open(self.out, "w", encoding="utf-8") as f:
            f.write("# previous\n")
        with open(SAMPLE, encoding="utf-8") as f:
            text = f.read().replace("; unqualified ", "; qualified   ")
        data = self.write_data(text)

        with self.assertLogs("emoji_lookup.generate", level="ERROR") as cm:
            self.assertEqual(main(["--data", data, "--out", self.out]), 1)

        self.assertIn("unknown status 'qualified'", cm.output[-1])
        self.assertIn("line 10", cm.output[-1])
        with open(self.out, encoding="utf-8") as f:
            self.assertEqual(f.read(), "# previous\n")
        self.assertEqual(sorted(os.listdir(self.tmpdir)),
                         ["emoji-test.txt", "emoji_data.py"])

    def test_invalid_utf8(self):
        data = os.path.join(self.tmpdir, "emoji-test.txt")
        with open(data, "wb") as f:
            f.write(b"# Version: 15.1\n\xff\xfe\n")

        with self.assertLogs("emoji_lookup.generate", level="ERROR"):
            self.assertEqual(main(["--data", data, "--out", self.out]), 1)
        self.assertFalse(os.path.exists(self.out))

    def test_requires_data_and_out(self):
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                main(["--out", self.out])
            self.assertNotEqual(cm.exception.code, 0)

            with self.assertRaises(SystemExit) as cm:
                main(["--data", SAMPLE])
            self.assertNotEqual(cm.exception.code, 0)

            with self.assertRaises(SystemExit):
                main(["--data", SAMPLE, "--download", "15.1", "--out", self.out])

    def test_rejects_bad_columns(self):
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["--data", SAMPLE, "--out", self.out,
                      "--status-column", "60", "--comment-column", "55"])


class TestGenerate(GeneratorTestCase):
    def test_status_count_mismatch_warns(self):
        with open(SAMPLE, encoding="utf-8") as f:
            text = f.read().replace("# component : 1", "# component : 9")
        data = self.write_data(text)

        with self.assertLogs("emoji_lookup.generate", level="WARNING") as cm:
            generate(data, self.out)

        self.assertTrue(any("9 component" in line for line in cm.output))

    def test_edition_without_entries_is_fatal(self):
        with self.assertRaises(GenerateError) as cm:
            generate(SAMPLE, self.out, version="16.0")

        self.assertIn("16.0", str(cm.exception))
        self.assertEqual(os.listdir(self.tmpdir), [])

    def test_parse_error_names_file(self):
        data = self.write_data("# Version: 15.1\n1F60E ; fully-qualified\n")
        with self.assertRaises(ParseError) as cm:
            generate(data, self.out)

        self.assertEqual(cm.exception.filename, data)
        self.assertEqual(cm.exception.lineno, 2)
        self.assertIn(data, str(cm.exception))

    def test_missing_version_is_fatal(self):
        data = self.write_data("")
        with self.assertRaises(GenerateError):
            generate(data, self.out)


class TestRenderTable(unittest.TestCase):
    def test_escapes(self):
        record = EmojiRecord("©", "it's \"quoted\" \\ piñata",
                             Status.UNQUALIFIED, "0.6", "", "Symbols", "other-symbol")
        source = render_table("15.1", [record])
        namespace = {"__name__": "emoji_lookup._generated", "__package__": "emoji_lookup"}
        exec(source, namespace)

        self.assertEqual(namespace["EMOJI_TABLE"], {"©": record})
        source.encode("ascii")

    def test_header(self):
        source = render_table("15.1", [])
        self.assertIn("# Unicode Emoji 15.1, 0 entries", source)
        self.assertIn("VERSION = '15.1'", source)
        self.assertTrue(source.endswith("}\n"))


class TestStandalone(GeneratorTestCase):
    def test_types_match_package(self):
        self.assertEqual([(s.name, s.value) for s in generate_emoji.Status],
                         [(s.name, s.value) for s in Status])
        self.assertEqual(generate_emoji.EmojiRecord._fields, EmojiRecord._fields)

    def test_runs_without_generated_table(self):
        # Fresh checkout layout, emoji_lookup/emoji_data.py not generated yet
        os.mkdir(os.path.join(self.tmpdir, "tools"))
        shutil.copy(os.path.join(ROOT, "tools", "generate_emoji.py"),
                    os.path.join(self.tmpdir, "tools"))
        package = os.path.join(self.tmpdir, "emoji_lookup")
        os.mkdir(package)
        for name in ["__init__.py", "lookup.py", "record.py"]:
            shutil.copy(os.path.join(ROOT, "emoji_lookup", name), package)
        env = {k: v for k, v in os.environ.items() if k != "PYTHONPATH"}

        result = subprocess.run(
            [sys.executable, os.path.join("tools", "generate_emoji.py"),
             "--data", os.path.abspath(SAMPLE),
             "--out", os.path.join("emoji_lookup", "emoji_data.py")],
            cwd=self.tmpdir, env=env, capture_output=True, text=True)
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertIn("Done!", result.stderr)

        result = subprocess.run(
            [sys.executable, "-c",
             "from emoji_lookup import VERSION, lookup; "
             "print(VERSION, lookup('\\U0001F60E')[0].name)"],
            cwd=self.tmpdir, env=env, capture_output=True, text=True)
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout.strip(), "15.1 smiling face with sunglasses")


class TestDownload(GeneratorTestCase):
    def setUp(self):
        super().setUp()
        patcher = mock.patch.object(generate_emoji, "CACHE_DIR",
                                    os.path.join(self.tmpdir, "cache"))
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_download_and_cache(self):
        with open(SAMPLE, "rb") as f:
            payload = f.read()
        response = mock.MagicMock()
        response.__enter__.return_value.read.return_value = payload

        with mock.patch("urllib.request.urlopen", return_value=response) as urlopen:
            self.assertEqual(main(["--download", "15.1", "--out", self.out]), 0)
            self.assertEqual(main(["--download", "15.1", "--out", self.out]), 0)

        self.assertEqual(urlopen.call_count, 1)
        request = urlopen.call_args[0][0]
        self.assertEqual(request.full_url,
                         "https://unicode.org/Public/emoji/15.1/emoji-test.txt")
        cached = os.path.join(self.tmpdir, "cache", "15.1", "emoji-test.txt")
        with open(cached, "rb") as f:
            self.assertEqual(f.read(), payload)
        self.assertEqual(len(load_table(self.out)["EMOJI_TABLE"]), 10)

    def test_download_failure(self):
        error = urllib.error.URLError("offline")
        with mock.patch("urllib.request.urlopen", side_effect=error):
            with self.assertLogs("emoji_lookup.generate", level="ERROR") as cm:
                self.assertEqual(main(["--download", "15.1", "--out", self.out]), 1)

        self.assertIn("Failed to download", cm.output[-1])
        self.assertFalse(os.path.exists(self.out))

    def test_rejects_bad_edition(self):
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["--download", "../15.1", "--out", self.out])


if __name__ == "__main__":
    unittest.main()
