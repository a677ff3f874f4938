"""
Lexicon routes: /api/lexicon
"""

from fastapi import APIRouter, HTTPException

from morphsearch.core.lexicon import WordClass
from morphsearch.server.routes.patterns import hit_to_dict, require_lexicon


router = APIRouter(prefix="/api/lexicon", tags=["lexicon"])


@router.get("/{word}")
async def lookup_word(word: str, db: int | None = None):
    """Irregular synsets for a surface form, verbs before nouns."""
    lexicon = require_lexicon(db)
    hits = []
    for word_class in lexicon.word_classes:
        hit = lexicon.lookup(word_class, word)
        if hit is not None:
            hits.append(hit_to_dict(hit, lexicon))
    if not hits:
        raise HTTPException(status_code=404, detail=f"'{word}' is not an irregular form")
    return {"word": word, "hits": hits}


@router.get("/{word_class}/synsets/{synset_id}")
async def get_synset(word_class: WordClass, synset_id: int, db: int | None = None):
    """All forms of one synset."""
    lexicon = require_lexicon(db)
    forms = lexicon.forms_of(word_class, synset_id)
    if not forms:
        raise HTTPException(status_code=404, detail="Synset not found")
    return {"word_class": word_class.value, "synset_id": synset_id, "forms": list(forms)}
