"""CLI for passcraft: generate passwords, PINs and passphrases; analyze password strength."""

import argparse
import logging
import sys

from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .analyzer import is_common_password
from .config import DEFAULTS, config_path, load_config, set_value
from .errors import PasscraftError
from .evaluator import evaluate, summarize
from .generator import generate, generate_pin
from .log import setup_logging
from .vocabulary import generate_passphrase

FACT_ROWS = (
    ("Length", "length"),
    ("Spaces", "spaces_count"),
    ("Numbers", "numbers_count"),
    ("Lowercase letters", "lowercase_letters_count"),
    ("Uppercase letters", "uppercase_letters_count"),
    ("Symbols", "symbols_count"),
    ("Other characters", "other_characters_count"),
    ("Consecutive", "consecutive_count"),
    ("Non-consecutive", "non_consecutive_count"),
    ("Progressive", "progressive_count"),
    ("Common password", "is_common"),
)

def cmd_generate(args):
    for i in range(args.copies):
        pw = generate(
            length=args.length,
            use_symbols=args.symbols,
            use_upper=not args.no_upper,
            use_digits=not args.no_digits,
            exclude_similar=args.exclude_similar,
            strict=not args.no_strict,
        )
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
        summary = summarize(pw)
        print(
            f"   Strength: {summary['label']} (score {summary['score']:.1f} / 100), "
            f"time to crack: {summary['crack_times']}"
        )

def cmd_pin(args):
    for i in range(args.copies):
        print(f"[bold green]PIN #{i+1}:[/bold green] {generate_pin(args.length)}")

def cmd_words(args):
    for i in range(args.copies):
        phrase = generate_passphrase(
            count=args.length,
            full_words=not args.syllables,
            separator=args.separator,
            capitalize=args.capitalize,
            uppercase=args.uppercase,
        )
        print(f"[bold green]Passphrase #{i+1}:[/bold green] {escape(phrase)}")

def cmd_analyze(args):
    result = evaluate(args.password)
    header = f"Score: {result['score']:.1f} / 100 — {result['label']}"
    body = (
        f"Estimated time to crack: {result['crack_times']}\n"
        f"Estimated entropy: {result['entropy_bits']:.1f} bits\n"
    )
    print(Panel(body, title=header))
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Fact")
    table.add_column("Value", justify="right")
    for title, key in FACT_ROWS:
        table.add_row(title, str(result[key]))
    print(table)
    if result["explanations"]:
        print("[bold]Detections:[/bold]")
        for e in result["explanations"]:
            print(f" • {e}")

def cmd_common(args):
    if is_common_password(args.password):
        print("[red]Common password, do not use it.[/red]")
    else:
        print("[green]Not in the common-password list.[/green]")

def cmd_config_show(args):
    cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan", title=config_path())
    table.add_column("Setting")
    table.add_column("Value")
    for key in DEFAULTS:
        table.add_row(key, repr(cfg.get(key)))
    print(table)

def cmd_config_set(args):
    cfg = set_value(args.key, args.value)
    print(f"[green]Saved[/green] {args.key} = {escape(repr(cfg[args.key]))}")

def build_parser() -> argparse.ArgumentParser:
    cfg = load_config()
    parser = argparse.ArgumentParser(prog="passcraft")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more random passwords")
    gen.add_argument("--length", type=int, default=cfg["random_length"], help="Password length")
    gen.add_argument("--symbols", action="store_true", default=cfg["random_symbols"], help="Include symbols")
    gen.add_argument("--no-upper", action="store_true", default=not cfg["random_uppercase"], help="Disable uppercase")
    gen.add_argument("--no-digits", action="store_true", default=not cfg["random_numbers"], help="Disable digits")
    gen.add_argument("--exclude-similar", action="store_true", default=cfg["random_exclude_similar"],
                     help="Leave out look-alike characters such as 0/O and 1/l/I")
    gen.add_argument("--no-strict", action="store_true", default=not cfg["random_strict"],
                     help="Do not force one character of every enabled class")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    pin = sub.add_parser("pin", help="Generate numeric PINs")
    pin.add_argument("--length", type=int, default=cfg["pin_length"], help="PIN length")
    pin.add_argument("--copies", type=int, default=1, help="How many PINs to generate")
    pin.set_defaults(func=cmd_pin)

    words = sub.add_parser("words", help="Generate memorable passphrases")
    words.add_argument("--length", type=int, default=cfg["memorable_length"], help="Number of words")
    words.add_argument("--syllables", action="store_true", default=not cfg["memorable_full_words"],
                       help="Use syllables instead of whole words")
    words.add_argument("--separator", type=str, default=cfg["memorable_separator"],
                       help="Word separator (empty means a space)")
    words.add_argument("--capitalize", action="store_true", default=cfg["memorable_capitalize"],
                       help="Capitalize each word")
    words.add_argument("--uppercase", action="store_true", default=cfg["memorable_uppercase"],
                       help="Uppercase each word")
    words.add_argument("--copies", type=int, default=1, help="How many passphrases to generate")
    words.set_defaults(func=cmd_words)

    an = sub.add_parser("analyze", help="Analyze a password: composition, score, crack time")
    an.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    an.set_defaults(func=cmd_analyze)

    cm = sub.add_parser("common", help="Check a password against the common-password list")
    cm.add_argument("password", type=str, help="Password to check")
    cm.set_defaults(func=cmd_common)

    cf = sub.add_parser("config", help="Show or change the saved defaults")
    cfsub = cf.add_subparsers(dest="ccmd", required=True)
    cf_show = cfsub.add_parser("show", help="Show current settings")
    cf_show.set_defaults(func=cmd_config_show)
    cf_set = cfsub.add_parser("set", help="Change one setting, e.g. random_length 24")
    cf_set.add_argument("key", type=str, help="Setting name")
    cf_set.add_argument("value", type=str, help="New value")
    cf_set.set_defaults(func=cmd_config_set)
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        setup_logging(logging.DEBUG)
    try:
        args.func(args)
    except PasscraftError as e:
        print(f"[red]{escape(str(e))}[/red]")
        sys.exit(2)

if __name__ == "__main__":
    main()
