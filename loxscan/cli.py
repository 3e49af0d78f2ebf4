"""
Command-line driver for the Lox scanner.

    loxscan              # interactive prompt, one line per scan
    loxscan script.lox   # scan a whole file and print its tokens

Exit codes follow the BSD sysexits convention: 64 for bad usage,
65 for a lexical error in the script, 66 for an unreadable script.

Author: xwest
"""

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional, TextIO, Union

from . import __version__
from .diagnostics import ConsoleReporter, Reporter
from .lexer import LexerError, Scanner, Token
from .lexer.scanner import SOURCE_ENCODING, read_source
from .utils.logger import get_logger

logger = get_logger(__name__)

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

PROMPT = "> "


def run(source: str, reporter: Reporter, out: TextIO) -> List[Token]:
    """Scan one source unit and print each token on its own line."""
    tokens = Scanner(source, reporter).scan_tokens()
    for token in tokens:
        print(token, file=out)
    return tokens


def run_file(path: str, out: TextIO, err: TextIO) -> int:
    """Scan a whole script; a lexical error maps to EX_DATAERR."""
    try:
        source = read_source(path)
    except OSError as e:
        print(f"loxscan: cannot read {path}: {e.strerror or e}", file=err)
        return EX_NOINPUT

    try:
        run(source, ConsoleReporter(out), out)
    except LexerError:
        # Already printed by the reporter
        logger.debug("Lexical error in %s", path)
        return EX_DATAERR
    return EX_OK


def run_prompt(inp: Union[TextIO, BinaryIO], out: TextIO) -> int:
    """Read-scan-print loop. Errors are reported and the loop goes on.

    Binary input is decoded one character per byte, like script files.
    """
    reporter = ConsoleReporter(out)
    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = inp.readline()
        if not line:
            break
        if isinstance(line, bytes):
            line = line.decode(SOURCE_ENCODING)
        try:
            run(line.rstrip("\n"), reporter, out)
        except LexerError:
            continue
    return EX_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxscan",
        description="Scan Lox source into tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    loxscan                 # Interactive prompt
    loxscan hello.lox       # Print the tokens of a script
    loxscan -v hello.lox    # Same, with debug logging on stderr
        """
    )
    parser.add_argument('script', nargs='*',
                        help='Script to scan (omit for an interactive prompt)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[Union[TextIO, BinaryIO]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Main entry point; returns the process exit status."""
    inp = stdin or sys.stdin.buffer
    out = stdout or sys.stdout
    err = stderr or sys.stderr

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=err,
        force=True,
    )

    if len(args.script) > 1:
        print("usage: loxscan [script]", file=out)
        return EX_USAGE

    try:
        if args.script:
            return run_file(args.script[0], out, err)
        return run_prompt(inp, out)
    except KeyboardInterrupt:
        print(file=out)
        return 130


if __name__ == "__main__":
    sys.exit(main())
