"""CLI for pwforge: generate passwords, rate options, show/change saved settings."""

import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import DEFAULTS, coerce_value, load_config, save_config
from .errors import PasswordEngineError
from .evaluator import estimate_entropy, evaluate_strength, rate_options
from .generator import MAX_LENGTH, MIN_LENGTH, GenerationOptions, build_pool, generate

logger = logging.getLogger(__name__)

# passwords go out as Text and error messages are escaped, so their brackets
# and colons never reach the markup parser
console = Console(highlight=False, emoji=False)

MASK_CHAR = "•"

RATING_STYLES = {"Weak": "red", "Medium": "yellow", "Strong": "green"}


def mask(password: str) -> str:
    return MASK_CHAR * len(password)


def cmd_generate(args) -> int:
    options = GenerationOptions.from_flags(
        lower=args.lower,
        upper=args.upper,
        digits=args.digits,
        symbols=args.symbols,
        avoid_ambiguous=args.avoid_ambiguous,
    )
    try:
        pool = build_pool(options)
        passwords = [generate(pool, args.length) for _ in range(args.copies)]
    except PasswordEngineError as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        return 2

    logger.debug("generated %d password(s) of length %d", len(passwords), args.length)
    for i, pw in enumerate(passwords):
        shown = mask(pw) if args.hide else pw
        console.print(Text.assemble((f"Password #{i+1}: ", "bold green"), shown), soft_wrap=True)

    rating = rate_options(options, args.length)
    style = RATING_STYLES[rating.value]
    body = (
        f"Estimated entropy: {estimate_entropy(pool, args.length):.1f} bits\n"
        f"Pool size: {len(pool)} characters from {len(options.classes)} class(es)"
    )
    console.print(Panel(body, title=f"Password Strength: [{style}]{rating.value}[/{style}]"))
    return 0


def cmd_rate(args) -> int:
    rating = evaluate_strength(args.classes, args.length)
    style = RATING_STYLES[rating.value]
    console.print(f"Password Strength: [{style}]{rating.value}[/{style}]")
    return 0


def cmd_config_show(args) -> int:
    cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")
    for key in DEFAULTS:
        table.add_row(key, str(cfg[key]))
    console.print(table)
    return 0


def cmd_config_set(args) -> int:
    try:
        value = coerce_value(args.key, args.value)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        return 2
    if args.key == "length" and not MIN_LENGTH <= value <= MAX_LENGTH:
        console.print(f"[red]length must be between {MIN_LENGTH} and {MAX_LENGTH}[/red]")
        return 2
    if args.key == "copies" and value < 1:
        console.print("[red]copies must be at least 1[/red]")
        return 2
    cfg = load_config()
    cfg[args.key] = value
    save_config(cfg)
    console.print(f"[green]Saved[/green] {args.key} = {value}")
    return 0


def build_parser(cfg=None) -> argparse.ArgumentParser:
    cfg = cfg or DEFAULTS
    parser = argparse.ArgumentParser(prog="pwforge")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=cfg["length"],
                     help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH})")
    gen.add_argument("--lower", action=argparse.BooleanOptionalAction, default=cfg["lower"],
                     help="Include lowercase (a-z)")
    gen.add_argument("--upper", action=argparse.BooleanOptionalAction, default=cfg["upper"],
                     help="Include uppercase (A-Z)")
    gen.add_argument("--digits", action=argparse.BooleanOptionalAction, default=cfg["digits"],
                     help="Include digits (0-9)")
    gen.add_argument("--symbols", action=argparse.BooleanOptionalAction, default=cfg["symbols"],
                     help="Include special characters (!@#$...)")
    gen.add_argument("--avoid-ambiguous", action=argparse.BooleanOptionalAction,
                     default=cfg["avoid_ambiguous"],
                     help="Leave out ambiguous characters (O, 0, I, l, 1)")
    gen.add_argument("--copies", type=int, default=cfg["copies"], help="How many passwords to generate")
    gen.add_argument("--hide", action="store_true", help="Mask the password in the output")
    gen.set_defaults(func=cmd_generate)

    rt = sub.add_parser("rate", help="Rate a length / class-count combination")
    rt.add_argument("--length", type=int, required=True, help="Password length")
    rt.add_argument("--classes", type=int, required=True, choices=range(0, 5),
                    help="Number of character classes selected")
    rt.set_defaults(func=cmd_rate)

    c = sub.add_parser("config", help="Show or change saved defaults")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Show effective settings")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Change a setting")
    c_set.add_argument("key", choices=list(DEFAULTS), help="Setting name")
    c_set.add_argument("value", help="New value")
    c_set.set_defaults(func=cmd_config_set)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser(load_config())
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if getattr(args, "copies", 1) < 1:
        parser.error("--copies must be at least 1")
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
