#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""ContentReader and Section rendering."""
from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from owo import ContentReader, FileTask, Section
from owo.io.readers import binary_placeholder, language_tag


class ContentReaderTests(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name)
        self.reader = ContentReader()

    def tearDown(self) -> None:
        self._td.cleanup()

    def task(self, name: str, data: bytes, order: int = 0) -> FileTask:
        p = self.root / name
        p.write_bytes(data)
        return FileTask(path=p, display=f"./{name}", order=order)

    def test_text_body_is_right_stripped(self) -> None:
        sec = self.reader.read_section(self.task("a.txt", b"hello  \n\n\t\n"))
        self.assertIsNotNone(sec)
        self.assertEqual(sec.body, "hello")
        self.assertEqual(sec.language, "txt")
        self.assertFalse(sec.binary)

    def test_leading_and_inner_whitespace_preserved(self) -> None:
        sec = self.reader.read_section(self.task("m.py", b"\n  def f():\r\n\treturn 1\r\n"))
        self.assertEqual(sec.body, "\n  def f():\r\n\treturn 1")

    def test_unicode_text(self) -> None:
        sec = self.reader.read_section(self.task("u.md", "héllo ✓\n".encode("utf-8")))
        self.assertEqual(sec.body, "héllo ✓")

    def test_invalid_utf8_becomes_binary_placeholder(self) -> None:
        sec = self.reader.read_section(self.task("b.dat", b"\xff\xfe\x00"))
        self.assertEqual(sec.body, "[Binary file: 3 bytes]")
        self.assertTrue(sec.binary)
        self.assertEqual(sec.language, "dat")

    def test_placeholder_counts_every_byte(self) -> None:
        data = b"ok" + b"\x80" * 1000 + b"   "
        sec = self.reader.read_section(self.task("big.bin", data))
        self.assertEqual(sec.body, f"[Binary file: {len(data)} bytes]")

    def test_empty_file_is_text(self) -> None:
        sec = self.reader.read_section(self.task("empty.txt", b""))
        self.assertEqual(sec.body, "")
        self.assertFalse(sec.binary)

    def test_missing_file_is_dropped(self) -> None:
        task = FileTask(path=self.root / "gone.txt", display="./gone.txt")
        self.assertIsNone(self.reader.read_section(task))

    def test_directory_is_dropped(self) -> None:
        (self.root / "d").mkdir()
        task = FileTask(path=self.root / "d", display="./d")
        self.assertIsNone(self.reader.read_section(task))

    def test_order_and_display_carried_over(self) -> None:
        sec = self.reader.read_section(self.task("a.txt", b"x", order=7))
        self.assertEqual(sec.order, 7)
        self.assertEqual(sec.display, "./a.txt")


class LanguageTagTests(unittest.TestCase):
    def test_extension_without_dot(self) -> None:
        self.assertEqual(language_tag(Path("src/main.rs")), "rs")

    def test_last_extension_only(self) -> None:
        self.assertEqual(language_tag(Path("archive.tar.gz")), "gz")

    def test_no_extension(self) -> None:
        self.assertEqual(language_tag(Path("Makefile")), "")
        self.assertEqual(language_tag(Path(".bashrc")), "")

    def test_placeholder_format(self) -> None:
        self.assertEqual(binary_placeholder(0), "[Binary file: 0 bytes]")


class SectionRenderTests(unittest.TestCase):
    def test_render_with_language(self) -> None:
        sec = Section(display="./a.py", body="print(1)", language="py")
        self.assertEqual(sec.render(), "\n## File: `./a.py`\n```py\nprint(1)\n```\n")

    def test_render_bare_fence(self) -> None:
        sec = Section(display="./README", body="hi")
        self.assertEqual(sec.render(), "\n## File: `./README`\n```\nhi\n```\n")


if __name__ == "__main__":
    unittest.main()
