"""
Shared dependencies for routes.
"""

from pess.core.lexicon import Lexicon, open_lexicon


def get_lexicon(db: int | None = None) -> Lexicon:
    return open_lexicon(db)
