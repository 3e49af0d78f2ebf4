"""
Tests for the loxscan command-line driver.

Author: xwest
"""

import io
import logging
import os
import sys
import tempfile
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxscan.cli import EX_DATAERR, EX_NOINPUT, EX_OK, EX_USAGE, main


class TestCLI(unittest.TestCase):

    def setUp(self):
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _script(self, source: str) -> str:
        path = os.path.join(self.tmpdir.name, "script.lox")
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def _binary_script(self, data: bytes) -> str:
        path = os.path.join(self.tmpdir.name, "binary.lox")
        with open(path, "wb") as f:
            f.write(data)
        return path

    def _main(self, argv, stdin=None):
        return main(argv, stdin=stdin, stdout=self.out, stderr=self.err)

    def test_too_many_arguments(self):
        status = self._main(["a.lox", "b.lox"])
        self.assertEqual(status, EX_USAGE)
        self.assertEqual(self.out.getvalue(), "usage: loxscan [script]\n")

    def test_file_mode_prints_tokens(self):
        status = self._main([self._script("var x = 1;\n")])
        self.assertEqual(status, EX_OK)
        self.assertEqual(self.out.getvalue().splitlines(), [
            "VAR('var')",
            "IDENTIFIER('x')",
            "EQUAL('=')",
            "NUMBER('1' -> 1.0)",
            "SEMICOLON(';')",
            "EOF('')",
        ])

    def test_file_mode_lexical_error(self):
        status = self._main([self._script("print 1;\nprint @;\n")])
        self.assertEqual(status, EX_DATAERR)
        # No tokens are printed when the scan fails
        self.assertEqual(self.out.getvalue(), "[line 2] Error : Unexpected character.\n")

    def test_file_mode_missing_file(self):
        status = self._main([os.path.join(self.tmpdir.name, "missing.lox")])
        self.assertEqual(status, EX_NOINPUT)
        self.assertIn("cannot read", self.err.getvalue())

    def test_prompt_mode(self):
        stdin = io.StringIO("a + b\n@\nvar\n")
        status = self._main([], stdin=stdin)
        output = self.out.getvalue()

        self.assertEqual(status, EX_OK)
        self.assertEqual(output.count("> "), 4)
        self.assertIn("PLUS('+')", output)
        self.assertIn("[line 1] Error : Unexpected character.", output)
        # The loop keeps going after an error
        self.assertIn("VAR('var')", output)

    def test_prompt_mode_empty_input(self):
        status = self._main([], stdin=io.StringIO(""))
        self.assertEqual(status, EX_OK)
        self.assertEqual(self.out.getvalue(), "> ")

    def test_file_mode_non_utf8_string(self):
        """A byte that is not valid UTF-8 inside a string is kept."""
        status = self._main([self._binary_script(b'print "caf\xe9";\n')])
        self.assertEqual(status, EX_OK)
        self.assertIn("STRING('\"caf\xe9\"' -> 'caf\xe9')", self.out.getvalue().splitlines())

    def test_file_mode_non_ascii_byte_outside_string(self):
        status = self._main([self._binary_script(b"\xe9")])
        self.assertEqual(status, EX_DATAERR)
        self.assertEqual(self.out.getvalue(), "[line 1] Error : Unexpected character.\n")

    def test_prompt_mode_binary_input(self):
        stdin = io.BytesIO(b'"caf\xe9"\n\xe9\n')
        status = self._main([], stdin=stdin)
        output = self.out.getvalue()

        self.assertEqual(status, EX_OK)
        self.assertIn("'caf\xe9'", output)
        self.assertIn("[line 1] Error : Unexpected character.", output)

    def test_verbose_flag_applies_on_every_call(self):
        missing = os.path.join(self.tmpdir.name, "missing.lox")

        self._main(["-v", missing])
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

        self._main([missing])
        self.assertEqual(logging.getLogger().level, logging.WARNING)


if __name__ == '__main__':
    unittest.main()
