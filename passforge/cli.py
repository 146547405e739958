"""Passforge command-line interface.

Usage examples:
    python -m passforge generate -n 20 --upper --digits --all-symbols -c 5
    python -m passforge generate --basic-symbols --show-pool
    python -m passforge analyze mypassword
    python -m passforge analyze -f passwords.txt
"""

import argparse
import logging
import random
import sys

from passforge import (
    DEFAULT_LENGTH,
    GenerationOptions,
    PassforgeError,
    analyze_password,
    build_character_pool,
    pool_composition,
)
from passforge.adapter import PasswordController

logger = logging.getLogger(__name__)


class TerminalAdapter:
    """UI adapter that reads from parsed arguments and prints to a stream."""

    def __init__(self, options: GenerationOptions | None = None, out=None):
        self.options = options or GenerationOptions()
        self.password = ""
        self.out = out or sys.stdout

    def read_options(self) -> GenerationOptions:
        return self.options

    def render_password(self, password: str) -> None:
        score = analyze_password(password)["score"]
        print(f"  {password}  (score {score})", file=self.out)

    def read_password_input(self) -> str:
        return self.password

    def render_analysis(self, score: int, messages: list[str]) -> None:
        print(f"  '{self.password}' -- score {score}", file=self.out)
        for m in messages:
            print(f"            ! {m}", file=self.out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passforge",
        description="Generate passwords and analyse password strength.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate random passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"Password length (default: {DEFAULT_LENGTH})",
    )
    gen_p.add_argument("--upper", action="store_true", help="Include uppercase letters")
    gen_p.add_argument("--digits", action="store_true", help="Include digits")
    gen_p.add_argument(
        "--basic-symbols", action="store_true",
        help="Include the basic symbol set",
    )
    gen_p.add_argument(
        "--all-symbols", action="store_true",
        help="Include every printable ASCII symbol",
    )
    gen_p.add_argument(
        "--no-weighting", action="store_true",
        help="Give every character the same weight instead of balancing classes",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument("--seed", type=int, help="Seed for reproducible output")
    gen_p.add_argument(
        "--show-pool", action="store_true",
        help="Print how many pool entries each character class holds",
    )

    # ── analyze ────────────────────────────────────────────────────────
    an_p = sub.add_parser("analyze", help="Score password strength")
    an_p.add_argument("passwords", nargs="*", help="Passwords to analyse")
    an_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "analyze":
        return _cmd_analyze(args)

    parser.print_help()
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    options = GenerationOptions(
        length=args.length,
        include_upper=args.upper,
        include_num=args.digits,
        include_basic_symbols=args.basic_symbols,
        include_all_symbols=args.all_symbols,
        weighting=not args.no_weighting,
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    controller = PasswordController(TerminalAdapter(options), rng=rng)

    if args.show_pool:
        counts = pool_composition(build_character_pool(options))
        total = sum(counts.values())
        for name, count in counts.items():
            print(f"  {name:<10} {count:>4}  ({count / total:.0%})")

    try:
        for _ in range(args.count):
            controller.generate()
    except PassforgeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    return 0


def _cmd_analyze(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file) as f:
            passwords.extend(line.rstrip("\r\n") for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    adapter = TerminalAdapter()
    controller = PasswordController(adapter)
    weak = False
    for pwd in passwords:
        adapter.password = pwd
        report = controller.analyze()
        if report["score"] < 100:
            weak = True

    logger.debug("analysed %d password(s)", len(passwords))
    return 1 if weak else 0


if __name__ == "__main__":
    sys.exit(main())
