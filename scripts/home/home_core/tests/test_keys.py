from __future__ import annotations

import os
import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from home_core.keys import DOWN, ENTER, QUIT, UP, decode_key, decode_keys, poll_key  # noqa: E402


class DecodeKeyTests(unittest.TestCase):
    def test_arrows(self):
        self.assertEqual(decode_key("\x1b[A"), UP)
        self.assertEqual(decode_key("\x1bOA"), UP)
        self.assertEqual(decode_key("\x1b[B"), DOWN)
        self.assertEqual(decode_key("\x1bOB"), DOWN)

    def test_enter(self):
        self.assertEqual(decode_key("\r"), ENTER)
        self.assertEqual(decode_key("\n"), ENTER)

    def test_quit_triggers(self):
        for chunk in ("\x1b", "q", "\x03"):
            self.assertEqual(decode_key(chunk), QUIT)

    def test_unknown_and_empty(self):
        self.assertIsNone(decode_key("x"))
        self.assertIsNone(decode_key("Q"))
        self.assertIsNone(decode_key(""))
        self.assertIsNone(decode_key(None))


class DecodeKeysTests(unittest.TestCase):
    def test_batched_arrows(self):
        self.assertEqual(list(decode_keys("\x1b[B\x1b[B")), [DOWN, DOWN])

    def test_mixed_batch_keeps_order(self):
        self.assertEqual(list(decode_keys("\x1b[A\x1bOBx\r\nq")), [UP, DOWN, ENTER, QUIT])

    def test_lone_escape_is_quit(self):
        self.assertEqual(list(decode_keys("\x1b")), [QUIT])
        self.assertEqual(list(decode_keys("\x1b[B\x1b")), [DOWN, QUIT])

    def test_empty(self):
        self.assertEqual(list(decode_keys("")), [])
        self.assertEqual(list(decode_keys(None)), [])


class PollKeyTests(unittest.TestCase):
    def test_reads_pending_bytes(self):
        r, w = os.pipe()
        try:
            os.write(w, b"\x1b[B")
            self.assertEqual(poll_key(r, 0.5), "\x1b[B")
        finally:
            os.close(r)
            os.close(w)

    def test_returns_none_when_idle(self):
        r, w = os.pipe()
        try:
            self.assertIsNone(poll_key(r, 0))
        finally:
            os.close(r)
            os.close(w)


if __name__ == "__main__":
    unittest.main()
