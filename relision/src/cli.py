"""Relision CLI — escape text for a border-delimited literal."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from .util import escape, quote

USAGE: str = """\
relision [OPTIONS] [INPUT] [-o OUTPUT]

Escape INPUT (or stdin) for use inside a literal delimited by a border character.

Options:
  --border CHAR       Border character (default: ")
                      CHAR is one character, a name (tab, cr, backslash,
                      space), or a code point such as U+0027
  --quote             Wrap the escaped text in two border characters
  --check             Print nothing; exit 1 if escaping would change the input
  -o, --output FILE   Write output to FILE instead of stdout
  --help              Show this help message
"""

BORDER_NAMES: dict[str, str] = {
    "tab": "\t",
    "cr": "\r",
    "backslash": "\\",
    "space": " ",
}

HEX_DIGITS: str = "0123456789abcdefABCDEF"


@dataclass
class Options:
    """Parsed command-line options."""

    border: str = '"'
    quote: bool = False
    check: bool = False
    input_file: str | None = None
    output_file: str | None = None


def parse_border(value: str) -> str | None:
    """Resolve a --border argument to a single character, or None if invalid."""
    if len(value) == 1:
        if 0xD800 <= ord(value) <= 0xDFFF:
            return None
        return value
    if value in BORDER_NAMES:
        return BORDER_NAMES[value]
    if value.startswith("U+") or value.startswith("u+"):
        digits = value[2:]
        if len(digits) == 0 or len(digits) > 6:
            return None
        for c in digits:
            if c not in HEX_DIGITS:
                return None
        code = int(digits, 16)
        if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
            return None
        return chr(code)
    return None


def parse_args(args: list[str]) -> tuple[Options | None, int]:
    """Parse command-line arguments. Returns (options, exit_code); options is None when done."""
    opts = Options()
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return (None, 0)
        elif arg == "--border":
            if i + 1 >= len(args):
                print("error: --border requires an argument", file=sys.stderr)
                return (None, 2)
            border = parse_border(args[i + 1])
            if border is None:
                print("error: invalid border '" + args[i + 1] + "'", file=sys.stderr)
                return (None, 2)
            opts.border = border
            i += 2
        elif arg == "-o" or arg == "--output":
            if i + 1 >= len(args):
                print("error: " + arg + " requires an argument", file=sys.stderr)
                return (None, 2)
            opts.output_file = args[i + 1]
            i += 2
        elif arg == "--quote":
            opts.quote = True
            i += 1
        elif arg == "--check":
            opts.check = True
            i += 1
        elif arg.startswith("-") and arg != "-":
            print("error: unknown flag '" + arg + "'", file=sys.stderr)
            return (None, 2)
        else:
            if opts.input_file is not None:
                print("error: unexpected argument '" + arg + "'", file=sys.stderr)
                return (None, 2)
            opts.input_file = arg
            i += 1
    return (opts, 0)


def read_text(input_file: str | None) -> tuple[str, int]:
    """Read text from file or stdin ("-" or None). Returns (text, exit_code)."""
    if input_file is not None and input_file != "-":
        try:
            with open(input_file, "rb") as f:
                raw = f.read()
        except OSError:
            print("error: cannot open '" + input_file + "'", file=sys.stderr)
            return ("", 1)
    else:
        raw = sys.stdin.buffer.read()
    try:
        text = raw.decode("utf-8")
    except ValueError:
        print("error: invalid utf-8 in input", file=sys.stderr)
        return ("", 1)
    return (text, 0)


def write_output(output: str, output_file: str | None) -> int:
    """Write output and a newline to file or stdout. Returns 0 on success, 1 on error."""
    data = (output + "\n").encode("utf-8")
    if output_file is not None:
        try:
            with open(output_file, "wb") as f:
                f.write(data)
        except OSError:
            print("error: cannot write '" + output_file + "'", file=sys.stderr)
            return 1
        return 0
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    opts, code = parse_args(argv if argv is not None else sys.argv[1:])
    if opts is None:
        return code
    text, err = read_text(opts.input_file)
    if err != 0:
        return err
    if opts.check:
        _, changed = escape(text, opts.border)
        if changed:
            return 1
        return 0
    if opts.quote:
        output = quote(text, opts.border)
    else:
        output, _ = escape(text, opts.border)
    return write_output(output, opts.output_file)


if __name__ == "__main__":
    sys.exit(main())
