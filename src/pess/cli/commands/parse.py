# src/pess/cli/commands/parse.py
"""
Parse English sentences into rules and gloss them back.
"""

import json
import sys
from pathlib import Path

from rich import print_json
from rich.console import Console

from pess.core.attributes import format_rule
from pess.core.grammar import parse, parse_all, ParseFailure, UnknownWord
from pess.core.gloss import gloss_text
from pess.core.lexicon import open_lexicon
from pess.core.tokenize import read_sentences, TokenizeError

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("parse", help="Parse sentences into rules")
    parser.add_argument("text", nargs="?", help="Sentence(s), each ending with a period")
    parser.add_argument("-f", "--file", help="Read sentences from a file instead")
    parser.add_argument("--all", action="store_true", help="Show every parse, not just the first")
    parser.add_argument("--json", action="store_true", help="Print rules as JSON")
    parser.add_argument("--db", type=int, default=None, help="Redis db holding the lexicon")
    parser.set_defaults(func=run)


def read_text(args) -> str:
    if args.file:
        p = Path(args.file)
        if not p.exists():
            raise FileNotFoundError(f"File not found: {args.file}")
        return p.read_text()
    if args.text is None:
        raise ValueError("Give a sentence or --file")
    return args.text


def run(args):
    try:
        text = read_text(args)
        sentences = read_sentences(text)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)
    except TokenizeError as e:
        console.print(f"[red]✗ Tokenize error: {e}[/red]")
        sys.exit(1)

    lexicon = open_lexicon(args.db)
    failures = 0

    for tokens in sentences:
        sentence = " ".join(t.text for t in tokens)
        try:
            if args.all:
                parses = list(parse_all(tokens, lexicon))
                if not parses:
                    raise ParseFailure(f"Could not parse: {sentence}")
            else:
                parses = [parse(tokens, lexicon)]
        except UnknownWord as e:
            console.print(f"[red]✗ {sentence}: {e}[/red]")
            failures += 1
            continue
        except ParseFailure as e:
            console.print(f"[red]✗ {e}[/red]")
            failures += 1
            continue

        if args.json:
            print_json(json.dumps({
                "sentence": sentence,
                "parses": [[r.to_dict() for r in rules] for rules in parses],
            }))
            continue

        console.print(f"[bold]{sentence}[/bold]")
        for i, rules in enumerate(parses):
            if len(parses) > 1:
                console.print(f"[dim]--- parse {i + 1} ---[/dim]")
            console.print("Parsed structure is:")
            for rule in rules:
                console.print(f"  {format_rule(rule)}", markup=False)
            console.print(f"Understood: {gloss_text(rules)}", markup=False)
        console.print()

    if failures:
        sys.exit(1)
