# app/normalizers/types.py
from typing import Any, Dict, List, Union

# Anything json.loads can hand back. Kept loose on purpose: the model output
# has no fixed schema.
JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

TEXT_KEY = "text"
LATEX_KEY = "text_latex"
