"""
Vocabulary routes: /api/vocab
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from pess.core.grammar import ParseFailure
from pess.core.lexicon import Category, Lexicon
from pess.core.tokenize import TokenizeError
from pess.core.vocab_lang import parse_declarations
from pess.server.deps import get_lexicon


router = APIRouter(prefix="/api/vocab", tags=["vocab"])


class DeclareRequest(BaseModel):
    text: str


@router.get("")
async def list_words(category: Category | None = None, lexicon: Lexicon = Depends(get_lexicon)):
    """List known words, optionally for one category."""
    categories = [category] if category else list(Category)
    return {c.value: lexicon.words(c) for c in categories}


@router.post("")
async def declare(req: DeclareRequest, lexicon: Lexicon = Depends(get_lexicon)):
    """Declare words: "zorbs is a verb and heron is a noun"."""
    try:
        declarations = parse_declarations(req.text)
    except TokenizeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ParseFailure:
        return {"registered": False, "words": []}

    for word, category in declarations:
        lexicon.register(word, category)

    return {
        "registered": True,
        "words": [{"word": w, "category": c.value} for w, c in declarations],
    }
