from __future__ import annotations

import unittest
from pathlib import Path

from walker.entry import Entry
from walker.filetypes import type_label, type_label_for_name


class TypeLabelTests(unittest.TestCase):
    def test_known_extension_uses_lexer_name(self) -> None:
        self.assertEqual(type_label_for_name("script.py"), "Python")

    def test_unknown_extension_is_plain_file(self) -> None:
        self.assertEqual(type_label_for_name("blob.zzzunknown"), "file")

    def test_directories_are_labelled_dir(self) -> None:
        entry = Entry(name="src.py", path=Path("/tmp/src.py"), is_directory=True)
        self.assertEqual(type_label(entry), "dir")


if __name__ == "__main__":
    unittest.main()
