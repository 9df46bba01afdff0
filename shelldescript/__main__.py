"""
__main__.py – CLI entry-point for the shelldescript package.

Usage:  python -m shelldescript [options] <command> FILE…

Commands
--------
check    FILE…   Parse each descript.txt and report errors.
charset  FILE…   Print the charset each file declares.
dump     FILE…   Dump the parsed directives as JSON.
format   FILE…   Rewrite files in canonical form.

Options
-------
-o DIR           Write dump/format output into DIR instead of stdout.
--charset NAME   Decode with NAME instead of the declared charset.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .charset import Charset, charset_from_label


def _charset_arg(args: argparse.Namespace) -> Charset | None:
    return charset_from_label(args.charset) if args.charset else None


def _report(path: Path, exc: Exception) -> None:
    print(f"Error: {path}: {exc}", file=sys.stderr)


# ---------------------------------------------------------------------------
# Sub-commands
# ---------------------------------------------------------------------------

def cmd_check(args: argparse.Namespace) -> int:
    from .parser import load_file

    errors = 0
    for fp in (Path(f) for f in args.files):
        try:
            doc = load_file(fp, charset=_charset_arg(args), verbose=args.verbose)
        except (OSError, ValueError) as exc:
            _report(fp, exc)
            errors += 1
            continue
        if args.verbose:
            n = sum(1 for _ in doc.directives())
            print(f"{fp}: OK ({len(doc)} lines, {n} directives)")
    return 1 if errors else 0


def cmd_charset(args: argparse.Namespace) -> int:
    from .parser import detect_charset

    errors = 0
    for fp in (Path(f) for f in args.files):
        try:
            charset = detect_charset(fp.read_bytes())
        except (OSError, ValueError) as exc:
            _report(fp, exc)
            errors += 1
            continue
        print(f"{fp}: {charset.label}")
    return 1 if errors else 0


def cmd_dump(args: argparse.Namespace) -> int:
    from .parser import load_file
    from .writer import document_to_dict

    outdir = Path(args.outdir) if args.outdir else None
    if outdir is not None:
        outdir.mkdir(parents=True, exist_ok=True)

    errors = 0
    for fp in (Path(f) for f in args.files):
        try:
            doc = load_file(fp, charset=_charset_arg(args), verbose=args.verbose)
        except (OSError, ValueError) as exc:
            _report(fp, exc)
            errors += 1
            continue
        text = json.dumps(document_to_dict(doc), ensure_ascii=False, indent=2)
        if outdir is None:
            print(text)
        else:
            out_path = outdir / (fp.stem + ".json")
            out_path.write_text(text + "\n", encoding="utf-8")
            if args.verbose:
                print(f"{fp.name} -> {out_path}")
    return 1 if errors else 0


def cmd_format(args: argparse.Namespace) -> int:
    from .parser import load_file
    from .writer import NEWLINES, encode_document, format_document

    newline = NEWLINES[args.newline]
    outdir = Path(args.outdir) if args.outdir else None
    if outdir is not None:
        outdir.mkdir(parents=True, exist_ok=True)

    errors = 0
    for fp in (Path(f) for f in args.files):
        try:
            doc = load_file(fp, charset=_charset_arg(args), verbose=args.verbose)
            if outdir is None:
                sys.stdout.write(format_document(doc, newline))
                continue
            out_path = outdir / fp.name
            out_path.write_bytes(
                encode_document(doc, _charset_arg(args), newline)
            )
        except (OSError, ValueError) as exc:
            _report(fp, exc)
            errors += 1
            continue
        if args.verbose:
            print(f"{fp.name} -> {out_path}")
    return 1 if errors else 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m shelldescript",
        description="Parse and normalise Ukagaka shell descript.txt files.",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print progress messages.")
    parser.add_argument("-o", "--outdir", metavar="DIR",
                        help="Output directory for dump/format (default: stdout).")
    parser.add_argument("--charset", metavar="NAME",
                        choices=[c.label for c in Charset if c is not Charset.DEFAULT],
                        help="Decode with this charset instead of the declared one.")

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.required = True

    # check
    p_check = sub.add_parser("check", help="Parse files and report errors.")
    p_check.add_argument("files", nargs="+", metavar="FILE")

    # charset
    p_cs = sub.add_parser("charset", help="Print the declared charset of each file.")
    p_cs.add_argument("files", nargs="+", metavar="FILE")

    # dump
    p_dump = sub.add_parser("dump", help="Dump parsed directives as JSON.")
    p_dump.add_argument("files", nargs="+", metavar="FILE")

    # format
    p_fmt = sub.add_parser("format", help="Rewrite files in canonical form.")
    p_fmt.add_argument("files", nargs="+", metavar="FILE")
    p_fmt.add_argument("--newline", choices=["crlf", "lf"], default="crlf",
                       help="Line terminator to write (default: crlf).")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

_COMMANDS = {
    "check":   cmd_check,
    "charset": cmd_charset,
    "dump":    cmd_dump,
    "format":  cmd_format,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args   = parser.parse_args(argv)
    return _COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
