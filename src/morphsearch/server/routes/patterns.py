"""
Pattern routes: /api/stem, /api/fragment, /api/query
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from morphsearch.core.lexicon import IrregularLexicon
from morphsearch.core.patterns import SEPARATOR, build_fragment, compose_query
from morphsearch.core.stemmer import stem_word
from morphsearch.server.deps import get_lexicon


router = APIRouter(prefix="/api", tags=["patterns"])


class QueryRequest(BaseModel):
    words: list[str]


def require_lexicon(db: int | None) -> IrregularLexicon:
    lexicon = get_lexicon(db)
    if lexicon is None:
        raise HTTPException(status_code=404, detail=f"No lexicon published to db {db}")
    return lexicon


def hit_to_dict(hit, lexicon: IrregularLexicon) -> dict | None:
    if hit is None:
        return None
    return {
        "word_class": hit.word_class.value,
        "synset_ids": list(hit.synset_ids),
        "forms": lexicon.alternatives(hit),
    }


@router.get("/stem/{word}")
async def get_stem(word: str, db: int | None = None):
    """Stem a word and report any irregular synsets it reduced to."""
    lexicon = require_lexicon(db)
    result = stem_word(word, lexicon)
    return {
        "word": result.word,
        "stem": result.stem,
        "irregular": hit_to_dict(result.irregular, lexicon),
    }


@router.get("/fragment/{word}")
async def get_fragment(word: str, db: int | None = None):
    """Pattern fragment for one word."""
    lexicon = require_lexicon(db)
    return {"word": word, "fragment": build_fragment(word, lexicon)}


@router.post("/query")
async def post_query(req: QueryRequest, db: int | None = None):
    """Ordered multi-word pattern."""
    if not req.words:
        raise HTTPException(status_code=400, detail="words must not be empty")
    lexicon = require_lexicon(db)
    return {
        "words": req.words,
        "fragments": [build_fragment(w, lexicon) for w in req.words],
        "separator": SEPARATOR,
        "pattern": compose_query(req.words, lexicon),
    }
