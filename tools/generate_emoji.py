#!/usr/bin/env python3
"""
Generate the emoji_lookup table from a Unicode emoji-test.txt file
Parses the fixed-column test data of each Unicode Emoji edition and writes a
Python module mapping every emoji sequence to its EmojiRecord

Usage: python3 generate_emoji.py --data ../data/15.1/emoji-test.txt --out ../emoji_lookup/emoji_data.py
       python3 generate_emoji.py --download 15.1 --out ../emoji_lookup/emoji_data.py
"""

import argparse
import logging
import os
import re
import stat
import sys
import tempfile
import urllib.error
import urllib.request
from collections import Counter
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterable, List, NamedTuple, Optional

log = logging.getLogger("emoji_lookup.generate")


# Same names and values as emoji_lookup.record. The generator never imports
# emoji_lookup, which needs the emoji_data module this script writes.
class Status(IntEnum):
    COMPONENT = 0
    FULLY_QUALIFIED = 1
    MINIMALLY_QUALIFIED = 2
    UNQUALIFIED = 3


class EmojiRecord(NamedTuple):
    sequence: str
    name: str
    status: Status
    introduced: str
    fully_qualifies_as: str
    group: str = ""
    subgroup: str = ""


# emoji-test.txt base URL, one directory per edition
EMOJI_TEST_BASE = "https://unicode.org/Public/emoji"

# Cache directory for downloaded files
CACHE_DIR = os.path.join(os.path.dirname(__file__), ".emoji_cache")

# Data line layout, for example:
#
# 1F469 1F3FB 200D 2764 200D 1F48B 200D 1F469 1F3FB      ; minimally-qualified # 👩🏻‍❤‍💋‍👩🏻 E13.1 kiss: woman, woman, light skin tone
#
# Codepoints are padded up to STATUS_COLUMN, the status up to COMMENT_COLUMN.
# The comment holds the rendered emoji, "E" + the version it was introduced
# in, and the CLDR short name. The columns belong to the edition, not to the
# format, so they can be overridden from the command line.
STATUS_COLUMN = 55
STATUS_SEPARATOR = "; "
COMMENT_COLUMN = 77
COMMENT_SEPARATOR = "# "

STATUSES = {
    "component": Status.COMPONENT,
    "fully-qualified": Status.FULLY_QUALIFIED,
    "minimally-qualified": Status.MINIMALLY_QUALIFIED,
    "unqualified": Status.UNQUALIFIED,
}
STATUS_NAMES = {status: text for text, status in STATUSES.items()}

HEX_RE = re.compile(r"[0-9A-Fa-f]+")
EDITION_RE = re.compile(r"\d+\.\d+")
VERSION_RE = re.compile(r"#\s*Version:\s*(\S+)")
GROUP_RE = re.compile(r"#\s*group:\s*(.*\S)")
SUBGROUP_RE = re.compile(r"#\s*subgroup:\s*(.*\S)")
STATUS_COUNT_RE = re.compile(r"#\s*([a-z-]+)\s*:\s*(\d+)")


class GenerateError(Exception):
    """Fatal error, nothing gets written"""


class ParseError(GenerateError):
    """Malformed emoji-test.txt line"""

    def __init__(self, reason, lineno=None, line=None, filename=None):
        super().__init__(reason)
        self.reason = reason
        self.lineno = lineno
        self.line = line
        self.filename = filename

    def __str__(self):
        if self.lineno is None:
            return self.reason
        where = f"line {self.lineno}"
        if self.filename:
            where = f"{self.filename}, {where}"
        return f"{where}: {self.reason}: {self.line!r}"


@dataclass
class EmojiTest:
    """Contents of one emoji-test.txt file"""

    version: Optional[str] = None
    records: List[EmojiRecord] = field(default_factory=list)
    # Totals from the trailing "Status Counts" block, keyed by status
    declared_counts: Dict[Status, int] = field(default_factory=dict)


def parse_codepoints(text):
    """Convert space-delimited hex codepoints to a string"""
    chars = []
    for token in text.strip().split(" "):
        if not HEX_RE.fullmatch(token):
            raise ParseError(f"malformed codepoint {token!r}")
        codepoint = int(token, 16)
        if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
            raise ParseError(f"not a Unicode scalar value: {token}")
        chars.append(chr(codepoint))
    return "".join(chars)


def parse_status(text):
    try:
        return STATUSES[text.strip()]
    except KeyError:
        raise ParseError(f"unknown status {text.strip()!r}") from None


def parse_line(line, group="", subgroup="",
               status_column=STATUS_COLUMN, comment_column=COMMENT_COLUMN):
    """Parse a data line into an EmojiRecord, not yet linked to its fully-qualified form"""
    status_start = status_column + len(STATUS_SEPARATOR)
    emoji_start = comment_column + len(COMMENT_SEPARATOR)

    if len(line) <= emoji_start:
        raise ParseError("line ends before the emoji")
    if line[status_column:status_start] != STATUS_SEPARATOR:
        raise ParseError(f"expected {STATUS_SEPARATOR!r} at column {status_column}")
    if line[comment_column:emoji_start] != COMMENT_SEPARATOR:
        raise ParseError(f"expected {COMMENT_SEPARATOR!r} at column {comment_column}")

    sequence = parse_codepoints(line[:status_column])
    status = parse_status(line[status_start:comment_column])

    # str indexes by scalar value, the rendered emoji is len(sequence) long
    emoji_end = emoji_start + len(sequence)
    if line[emoji_start:emoji_end] != sequence:
        raise ParseError("rendered emoji does not match the codepoints")
    if line[emoji_end:emoji_end + 1] != " ":
        raise ParseError("expected a space after the emoji")

    trailing = line[emoji_end + 1:].split(" ", 1)
    if len(trailing) != 2:
        raise ParseError("missing space between version and name")
    introduced, name = trailing
    if not introduced.startswith("E") or len(introduced) < 2:
        raise ParseError(f"malformed version {introduced!r}")
    if not name:
        raise ParseError("empty name")

    return EmojiRecord(sequence, name, status, introduced[1:], "", group, subgroup)


def link_fully_qualified(records, fully_qualified_by_name):
    """Point each record at the fully-qualified record sharing its name"""
    linked = []
    for record in records:
        index = fully_qualified_by_name.get(record.name)
        if record.status == Status.COMPONENT:
            linked.append(record)
        elif index is None:
            log.debug("No fully-qualified form for %s %r",
                      STATUS_NAMES[record.status], record.name)
            linked.append(record)
        else:
            linked.append(record._replace(
                fully_qualifies_as=records[index].sequence))
    return linked


def parse_emoji_test(lines: Iterable[str],
                     status_column: int = STATUS_COLUMN,
                     comment_column: int = COMMENT_COLUMN) -> EmojiTest:
    """
    Parse emoji-test.txt into linked records

    Records keep file order. When two lines claim to be the fully-qualified
    form of the same name the later one wins.
    """
    test = EmojiTest()
    fully_qualified_by_name = {}
    seen = {}
    group = subgroup = ""

    for lineno, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("#"):
            match = VERSION_RE.match(stripped)
            if match:
                test.version = match.group(1)
            match = GROUP_RE.match(stripped)
            if match:
                group, subgroup = match.group(1), ""
            match = SUBGROUP_RE.match(stripped)
            if match:
                subgroup = match.group(1)
            match = STATUS_COUNT_RE.fullmatch(stripped)
            if match and match.group(1) in STATUSES:
                test.declared_counts[STATUSES[match.group(1)]] = int(match.group(2))
            continue

        try:
            record = parse_line(line, group, subgroup,
                                status_column=status_column,
                                comment_column=comment_column)
            if record.sequence in seen:
                raise ParseError(f"duplicate of line {seen[record.sequence]}")
        except ParseError as e:
            e.lineno, e.line = lineno, line
            raise

        seen[record.sequence] = lineno
        test.records.append(record)

        if record.status == Status.FULLY_QUALIFIED:
            if record.name in fully_qualified_by_name:
                log.warning("Line %d: %r is fully-qualified more than once, "
                            "using the later entry", lineno, record.name)
            fully_qualified_by_name[record.name] = len(test.records) - 1

    test.records = link_fully_qualified(test.records, fully_qualified_by_name)
    return test


def check_emoji_test(test, version):
    """Warn about totals that don't add up, fail on an edition with no entries"""
    counts = Counter(record.status for record in test.records)
    for status, declared in test.declared_counts.items():
        if counts[status] != declared:
            log.warning("File declares %d %s entries, parsed %d",
                        declared, STATUS_NAMES[status], counts[status])

    if not any(record.introduced == version for record in test.records):
        raise GenerateError(f"No entry was introduced in Unicode Emoji {version}, "
                            "check --emoji-version")

    return counts


def render_table(version, records):
    """Render the records as the emoji_data module"""
    out = [
        "#",
        "# Generated by tools/generate_emoji.py from emoji-test.txt, do not edit",
        "#",
        f"# Unicode Emoji {version}, {len(records)} entries",
        "#",
        "",
        "# pylint: disable=too-many-lines,line-too-long",
        "",
        "from .record import EmojiRecord, Status",
        "",
        f"VERSION = {ascii(version)}",
        "",
        "EMOJI_TABLE = {",
    ]

    # ascii() keeps the module pure ASCII whatever the names contain
    for r in records:
        out.append(
            f"    {ascii(r.sequence)}: EmojiRecord("
            f"{ascii(r.sequence)}, {ascii(r.name)}, Status.{r.status.name}, "
            f"{ascii(r.introduced)}, {ascii(r.fully_qualifies_as)}, "
            f"{ascii(r.group)}, {ascii(r.subgroup)}),")

    out.append("}")
    out.append("")
    return "\n".join(out)


def output_mode(path):
    """Permissions of the file being replaced, or of a new file under the umask"""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_output(path, data):
    """Replace path with data, leaving it untouched if anything fails"""
    directory = os.path.dirname(os.path.abspath(path))
    mode = output_mode(path)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".generate_emoji-")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        # mkstemp creates the file 0600
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise


def download_emoji_test(version):
    """Download emoji-test.txt for an edition, returns the cached path"""
    cache_path = os.path.join(CACHE_DIR, version, "emoji-test.txt")

    # Check cache first
    if os.path.exists(cache_path):
        log.info("Using cached %s", cache_path)
        return cache_path

    url = f"{EMOJI_TEST_BASE}/{version}/emoji-test.txt"
    log.info("Downloading %s...", url)

    try:
        req = urllib.request.Request(url, headers={"User-Agent": "Mozilla/5.0"})
        with urllib.request.urlopen(req, timeout=30) as response:
            data = response.read()
    except urllib.error.URLError as e:
        raise GenerateError(f"Failed to download {url}: {e}") from e

    # Cache the file
    os.makedirs(os.path.dirname(cache_path), exist_ok=True)
    write_output(cache_path, data)
    return cache_path


def generate(data_path, out_path, version=None,
             status_column=STATUS_COLUMN, comment_column=COMMENT_COLUMN):
    """Parse data_path and write the table module to out_path"""
    log.info("Generating emoji data from %s...", data_path)

    with open(data_path, encoding="utf-8") as f:
        try:
            test = parse_emoji_test(f, status_column=status_column,
                                    comment_column=comment_column)
        except ParseError as e:
            e.filename = data_path
            raise
        except UnicodeDecodeError as e:
            raise GenerateError(f"{data_path}: not UTF-8: {e}") from e

    version = version or test.version
    if not version:
        raise GenerateError(f"{data_path} has no Version header, "
                            "pass --emoji-version")

    counts = check_emoji_test(test, version)
    write_output(out_path, render_table(version, test.records).encode("utf-8"))

    summary = ", ".join(f"{STATUS_NAMES[status]}: {counts[status]}"
                        for status in Status)
    log.info("Done! Unicode Emoji %s, %d entries (%s) written to %s",
             version, len(test.records), summary, out_path)
    return test


def edition(value):
    if not EDITION_RE.fullmatch(value):
        raise argparse.ArgumentTypeError(f"not an emoji edition: {value!r}")
    return value


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate the emoji_lookup table from emoji-test.txt")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--data", metavar="PATH",
                        help="input emoji-test.txt")
    source.add_argument("--download", metavar="VERSION", type=edition,
                        help="fetch emoji-test.txt of this edition from unicode.org")
    parser.add_argument("--out", metavar="PATH", required=True,
                        help="output Python module")
    parser.add_argument("--emoji-version", type=edition,
                        help="edition to record, defaults to the Version header")
    parser.add_argument("--status-column", type=int, default=STATUS_COLUMN,
                        help=f"column of '; ' (default: {STATUS_COLUMN})")
    parser.add_argument("--comment-column", type=int, default=COMMENT_COLUMN,
                        help=f"column of '# ' (default: {COMMENT_COLUMN})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="also list names without a fully-qualified form")
    args = parser.parse_args(argv)

    if args.comment_column < args.status_column + len(STATUS_SEPARATOR):
        parser.error("--comment-column must come after the status column")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(message)s", stream=sys.stderr)

    try:
        data_path = args.data or download_emoji_test(args.download)
        generate(data_path, args.out, version=args.emoji_version,
                 status_column=args.status_column,
                 comment_column=args.comment_column)
    except (OSError, GenerateError) as e:
        log.error("Error: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
