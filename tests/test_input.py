"""Regression tests for raw-key decoding.

Covers ESC timing, arrow and editing-key sequences, control-key tokens,
and multi-byte UTF-8 characters typed into the rename buffer.
"""

import os
import time
import unittest

from walker import input as input_mod


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        keys = self._read_all(b"\x1b", 1)
        elapsed = time.monotonic() - started

        self.assertEqual(keys, ["ESC"])
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences(self) -> None:
        self.assertEqual(
            self._read_all(b"\x1b[A\x1b[B\x1b[C\x1b[D", 4),
            ["UP", "DOWN", "RIGHT", "LEFT"],
        )

    def test_editing_key_sequences(self) -> None:
        self.assertEqual(
            self._read_all(b"\x1b[3~\x1b[H\x1b[F\x1b[1~\x1b[4~\x1bOA", 6),
            ["DELETE", "HOME", "END", "HOME", "END", "UP"],
        )

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_control_tokens(self) -> None:
        self.assertEqual(
            self._read_all(b"\t\x7f\x15\r\n\x01\x05", 7),
            ["TAB", "BACKSPACE", "CTRL_U", "ENTER_CR", "ENTER_LF", "CTRL_A", "CTRL_E"],
        )

    def test_utf8_character_is_one_token(self) -> None:
        self.assertEqual(self._read_all("é€".encode("utf-8"), 2), ["é", "€"])

    def test_timeout_returns_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            self.assertEqual(input_mod.read_key(read_fd, timeout_ms=5), "")
        finally:
            os.close(read_fd)
            os.close(write_fd)


if __name__ == "__main__":
    unittest.main()
