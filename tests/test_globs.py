from __future__ import annotations

import sys
import unittest
from pathlib import Path

PROJECT_SRC = Path(__file__).resolve().parents[1] / "src"
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))

from cora.errors import GlobPatternError, WalkError  # noqa: E402
from cora.utils.globs import compile_pattern, compile_patterns, matches_any  # noqa: E402


def _match(rel_path: str, *patterns: str) -> bool:
    return matches_any(rel_path, compile_patterns(patterns))


class MatchesAnyTests(unittest.TestCase):
    CASES = [
        ("Match single file", "file.txt", ["*.txt"], True),
        ("Match file in subdirectory", "subdir/file.go", ["**/*.go"], True),
        ("No match", "file.txt", ["*.go"], False),
        ("Match with multiple patterns", "subdir/file.js", ["*.go", "**/*.js"], True),
        ("Match file name only", "subdir/config.json", ["config.json"], True),
        ("Match directory name", "ignoreme", ["ignoreme"], True),
        ("Base name at depth", "a/b/c/notes.txt", ["*.txt"], True),
        ("Double star stays in one segment", "a/b/file.go", ["**/*.go"], False),
        ("Full path star stops at slash", "src/a/b.py", ["src/*"], False),
        ("Full path star within segment", "src/a", ["src/*"], True),
        ("Full path anchored at root", "lib/src/a", ["src/*"], False),
        ("Empty pattern list", "anything", [], False),
    ]

    def test_table(self) -> None:
        for name, rel, patterns, expected in self.CASES:
            with self.subTest(name):
                self.assertEqual(expected, _match(rel, *patterns))


class SyntaxTests(unittest.TestCase):
    def test_question_mark_is_one_character(self) -> None:
        self.assertTrue(_match("file1.txt", "file?.txt"))
        self.assertFalse(_match("file10.txt", "file?.txt"))
        self.assertFalse(_match("a/b", "a?b"))

    def test_character_classes(self) -> None:
        self.assertTrue(_match("a.txt", "[ab].txt"))
        self.assertFalse(_match("c.txt", "[ab].txt"))
        self.assertTrue(_match("c.txt", "[!ab].txt"))
        self.assertTrue(_match("c.txt", "[^ab].txt"))
        self.assertTrue(_match("bx", "[a-c]x"))
        self.assertFalse(_match("dx", "[a-c]x"))
        self.assertTrue(_match("]", "[\\]]"))

    def test_escaped_wildcard_is_literal(self) -> None:
        self.assertTrue(_match("*.txt", "\\*.txt"))
        self.assertFalse(_match("a.txt", "\\*.txt"))

    def test_regex_metacharacters_are_literal(self) -> None:
        self.assertTrue(_match("a+b(1).txt", "a+b(1).txt"))
        self.assertFalse(_match("aab1.txt", "a+b(1).txt"))

    def test_match_is_case_sensitive(self) -> None:
        self.assertFalse(_match("README.md", "readme.md"))

    def test_full_path_flag(self) -> None:
        self.assertTrue(compile_pattern("src/*.py").full_path)
        self.assertFalse(compile_pattern("*.py").full_path)


class InvalidPatternTests(unittest.TestCase):
    def test_bad_patterns_raise(self) -> None:
        for pattern in ["[abc", "[]", "abc\\", "[z-a]", "[a\\"]:
            with self.subTest(pattern=pattern):
                with self.assertRaises(GlobPatternError) as cm:
                    compile_pattern(pattern)
                self.assertIsInstance(cm.exception, WalkError)
                self.assertEqual(pattern, cm.exception.pattern)
                self.assertIn(repr(pattern), str(cm.exception))


if __name__ == "__main__":
    unittest.main()
