# src/pess/cli/commands/vocab.py
"""
Vocabulary commands.
"""

import sys

from rich.console import Console
from rich.table import Table

from pess.core.lexicon import Category, open_lexicon
from pess.core.tokenize import read_sentences, TokenizeError
from pess.core.vocab_lang import declare_vocabulary

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("vocab", help="Lexicon tools")
    vocab_sub = parser.add_subparsers(dest="vocab_command", required=True)

    # add - declare words: "zorbs is a verb."
    add_p = vocab_sub.add_parser("add", help="Declare words, e.g. 'heron is a noun.'")
    add_p.add_argument("text", help="Declaration sentence(s)")
    add_p.add_argument("--db", type=int, default=None)
    add_p.set_defaults(func=vocab_add)

    # list
    list_p = vocab_sub.add_parser("list", help="List known words")
    list_p.add_argument("-c", "--category", choices=[c.value for c in Category])
    list_p.add_argument("--db", type=int, default=None)
    list_p.set_defaults(func=vocab_list)

    # seed - load the built-in vocabulary into redis
    seed_p = vocab_sub.add_parser("seed", help="Load built-in vocabulary into a redis lexicon")
    seed_p.add_argument("--db", type=int, required=True)
    seed_p.set_defaults(func=vocab_seed)


def vocab_add(args):
    try:
        sentences = read_sentences(args.text)
    except TokenizeError as e:
        console.print(f"[red]✗ Tokenize error: {e}[/red]")
        sys.exit(1)

    lexicon = open_lexicon(args.db)
    failed = False

    for tokens in sentences:
        sentence = " ".join(t.text for t in tokens)
        if declare_vocabulary(tokens, lexicon):
            console.print(f"✓ {sentence}", markup=False)
        else:
            console.print(f"[red]✗ Not a declaration: {sentence}[/red]")
            failed = True

    if failed:
        sys.exit(1)


def vocab_list(args):
    lexicon = open_lexicon(args.db)
    categories = [Category(args.category)] if args.category else list(Category)

    table = Table(title="Lexicon")
    table.add_column("Category")
    table.add_column("Words")
    for category in categories:
        words = lexicon.words(category)
        table.add_row(f"{category.keyword} ({len(words)})", " ".join(words))

    console.print(table)


def vocab_seed(args):
    lexicon = open_lexicon(args.db)
    added = lexicon.seed()
    console.print(f"✓ Seeded db {args.db}: {added} new words")
