"""
Parse and gloss routes: /api/parse, /api/gloss
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from pess.core.attributes import Attr, Kind, Rule
from pess.core.grammar import parse, parse_all, ParseFailure, UnknownWord
from pess.core.gloss import gloss, gloss_text
from pess.core.lexicon import Lexicon
from pess.core.tokenize import TokenizeError
from pess.server.deps import get_lexicon


router = APIRouter(prefix="/api", tags=["grammar"])


# === Request/Response Models ===

class AttrModel(BaseModel):
    kind: Kind
    value: str
    children: list["AttrModel"] = []


class RuleModel(BaseModel):
    head: AttrModel
    body: list[AttrModel] = []


class ParseRequest(BaseModel):
    text: str
    all: bool = False  # every parse, not just the first


class GlossRequest(BaseModel):
    rules: list[RuleModel] | None = None
    attrs: list[AttrModel] | None = None


# === Routes ===

@router.post("/parse")
async def parse_sentence(req: ParseRequest, lexicon: Lexicon = Depends(get_lexicon)):
    """Parse one sentence into rules."""
    try:
        if req.all:
            parses = list(parse_all(req.text, lexicon))
            if not parses:
                raise ParseFailure(f"Could not parse: {req.text}")
        else:
            parses = [parse(req.text, lexicon)]
    except TokenizeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UnknownWord as e:
        raise HTTPException(status_code=400, detail={
            "message": str(e),
            "unknown_word": e.word,
            "position": e.position,
        })
    except ParseFailure as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "parses": [[r.to_dict() for r in rules] for rules in parses],
        "gloss": [gloss_text(rules) for rules in parses],
    }


@router.post("/gloss")
async def gloss_rules(req: GlossRequest):
    """Gloss rules (or bare attributes) into English."""
    if req.rules is not None:
        items = [Rule.from_dict(r.model_dump()) for r in req.rules]
    elif req.attrs is not None:
        items = [Attr.from_dict(a.model_dump()) for a in req.attrs]
    else:
        raise HTTPException(status_code=400, detail="Expected 'rules' or 'attrs'")

    tokens = gloss(items)
    if tokens is items:
        raise HTTPException(status_code=400, detail="Nothing to gloss")
    return {"tokens": tokens, "text": " ".join(tokens)}
