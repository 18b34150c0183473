from typing import Any

from fastapi import APIRouter, Body

from app.normalizers import normalize_tree

router = APIRouter(prefix="/api", tags=["normalize"])


@router.post("/normalize")
def normalize(payload: Any = Body(None)) -> Any:
    """
    Run the math-text normalizer over any JSON body and return the result.
    Every object with a "text" key comes back with a "text_latex" sibling.
    """
    return normalize_tree(payload)
