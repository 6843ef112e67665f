# src/pess/cli/commands/gloss.py
"""
Gloss rules stored as JSON back into English.
"""

import json
import sys
from pathlib import Path

from rich.console import Console

from pess.core.attributes import Attr, Kind, Rule
from pess.core.gloss import gloss_text

console = Console()


# It very slowly and carefully eats languidly flying very very small
# insects and brown worms.
EXAMPLE = [
    Attr(Kind.DOES, "eats", (
        Attr(Kind.IS_HOW, "slowly", (Attr(Kind.IS_HOW, "very"),)),
        Attr(Kind.IS_HOW, "carefully"),
        Attr(Kind.IS_A, "insects", (
            Attr(Kind.IS_LIKE, "flying", (Attr(Kind.IS_HOW, "languidly"),)),
            Attr(Kind.IS_LIKE, "small", (
                Attr(Kind.IS_HOW, "very", (Attr(Kind.IS_HOW, "very"),)),
            )),
        )),
        Attr(Kind.IS_A, "worms", (Attr(Kind.IS_LIKE, "brown"),)),
    )),
]


def add_subparser(subparsers):
    parser = subparsers.add_parser("gloss", help="Gloss JSON rules into English")
    parser.add_argument("file", nargs="?", help="JSON file: a rule, an attribute, or a list of them")
    parser.add_argument("--example", action="store_true", help="Gloss a built-in sample term")
    parser.set_defaults(func=run)


def load_item(d: dict):
    if "head" in d:
        return Rule.from_dict(d)
    return Attr.from_dict(d)


def load(path: str):
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {path}")

    data = json.loads(p.read_text())
    if isinstance(data, list):
        return [load_item(d) for d in data]
    return load_item(data)


def run(args):
    if args.example:
        console.print(gloss_text(EXAMPLE), markup=False)
        return

    if not args.file:
        console.print("[red]✗ Give a JSON file or --example[/red]")
        sys.exit(1)

    try:
        item = load(args.file)
    except FileNotFoundError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)
    except (json.JSONDecodeError, KeyError, ValueError) as e:
        console.print(f"[red]✗ Bad rule file: {e}[/red]")
        sys.exit(1)

    console.print(gloss_text(item), markup=False)
