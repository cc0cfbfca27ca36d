"""PassGuardian command-line interface.

Usage examples:
    passguardian analyze 'Tr0ub4dor&3'
    passguardian analyze -f passwords.txt
    passguardian wordlist --name Alice --pet Rex -o alice.txt
    passguardian wordlist --name Max --birthdate 2020 --max 500 --print
"""

import argparse
import logging
import sys

from passguardian import (
    WORDLIST_FIELDS,
    WORDLIST_FILENAME,
    analyze_password,
    export_wordlist,
    generate_wordlist,
)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passguardian",
        description="Analyse password strength and build custom wordlists.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── analyze ────────────────────────────────────────────────────────
    analyze_p = sub.add_parser("analyze", help="Score password strength")
    analyze_p.add_argument("passwords", nargs="*", help="Passwords to analyse")
    analyze_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    # ── wordlist ───────────────────────────────────────────────────────
    wl_p = sub.add_parser(
        "wordlist", help="Generate a wordlist from personal facts",
    )
    for field in WORDLIST_FIELDS:
        wl_p.add_argument(f"--{field}", default="", help=f"{field.capitalize()} seed")
    wl_p.add_argument(
        "-o", "--output", default=WORDLIST_FILENAME,
        help=f"Output file (default: {WORDLIST_FILENAME})",
    )
    wl_p.add_argument(
        "--max", type=int, default=None, dest="max_words",
        help="Keep at most this many candidates",
    )
    wl_p.add_argument(
        "--print", action="store_true", dest="print_words",
        help="Print candidates to stdout instead of writing a file",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "analyze":
        return _cmd_analyze(args)
    if args.command == "wordlist":
        return _cmd_wordlist(args)

    parser.print_help()
    return 0


def _cmd_analyze(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file, encoding="utf-8") as f:
            passwords.extend(line.rstrip("\r\n") for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    for pwd in passwords:
        report = analyze_password(pwd)
        if report is None:
            print("  (empty)   -- nothing to analyse")
            continue

        filled = report["score"] // 10
        bar = "#" * filled + "-" * (10 - filled)
        print(f"  '{pwd}'")
        print(f"            Strength: [{bar}] {report['strength']} ({report['score']}%)")
        print(f"            Entropy:  {report['entropy']} bits")
        print(f"            Crack:    {report['time_to_crack']}")
        marks = ", ".join(
            f"{key}={'yes' if value else 'no'}"
            for key, value in report["characteristics"].items()
            if key != "length"
        )
        print(f"            Classes:  {marks}")
        for p in report["patterns"]:
            print(f"            ! {p['name']}")

    return 0


def _cmd_wordlist(args: argparse.Namespace) -> int:
    if args.max_words is not None and args.max_words < 0:
        print("Error: --max must not be negative", file=sys.stderr)
        return 1

    inputs = {field: getattr(args, field) for field in WORDLIST_FIELDS}
    words = generate_wordlist(inputs)

    if not words:
        print("Error: set at least one of " + ", ".join(
            f"--{field}" for field in WORDLIST_FIELDS
        ), file=sys.stderr)
        return 1

    if args.max_words is not None and len(words) > args.max_words:
        logger.warning(
            "Truncating wordlist from %d to %d candidates", len(words), args.max_words,
        )
        words = words[: args.max_words]

    if args.print_words:
        print(export_wordlist(words))
        return 0

    with open(args.output, "w", encoding="utf-8") as f:
        f.write(export_wordlist(words))
    print(f"  Wrote {len(words):,} candidates to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
