from pathlib import Path
from typing import Optional

from app.settings import Settings

SCHEMA_VERSION = "1.1.0"

# ---------------------------------------------------------------------
# Image -> JSON
# ---------------------------------------------------------------------

OCR_SYSTEM = """\
You are an OCR system for exam-style study problems. You read a problem image,
extract every piece of text and return it as structured JSON.

Output exactly this schema (version 1.1.0):

```json
{
  "version": "1.1.0",
  "problems": [
    {
      "id": "prob_001",
      "type": "multiple_choice",
      "question": {
        "text": "question text",
        "coordinates": {"x": 100, "y": 150, "width": 400, "height": 60}
      },
      "choices": [
        {"id": "1", "text": "choice 1", "coordinates": {"x": 100, "y": 250, "width": 300, "height": 30}}
      ],
      "answer": "number of the correct choice",
      "solution": {
        "steps": ["step 1", "step 2"],
        "correct_answer": "answer"
      }
    }
  ],
  "metadata": {
    "page_width_px": 800,
    "page_height_px": 600,
    "processing_time": "1.2s",
    "confidence": 0.95
  }
}
```

Rules:
1. Transcribe all text exactly, without typos. Keep Korean text in Korean.
2. Write math as it appears, using Unicode glyphs (³√a, x², ×, ÷, a/b).
3. Give x, y, width, height for every element in image pixels.
4. Separate question, choices and answer clearly.
5. Output valid JSON only.
"""

OCR_USER = """\
Convert the following study-problem image to the standard JSON format.

Image information:
- Image URL: {{image_url}}
- Page width: {{width}}px
- Page height: {{height}}px

Requirements:
1. Extract all text in the image exactly.
2. Separate the question from the choices.
3. Record coordinates for every element.
4. Include the answer and the solution.
5. Follow the standard JSON schema.

Output only valid JSON, with no explanation or extra text:

```json
{"version": "1.1.0", "problems": [...], "metadata": {...}}
```
"""

# ---------------------------------------------------------------------
# JSON -> HTML
# ---------------------------------------------------------------------

RENDER_SYSTEM = """\
You are a renderer. You receive a standard JSON (v1.1.0) problem object and
produce ONE complete HTML document for it.

Math rules (important):
- Prefer a field's "text_latex" over "text" when present and typeset it with
  MathJax (load tex-mml-chtml from the jsDelivr CDN; inline delimiters \\( \\)).
- Otherwise: ³√ -> <sup>3</sup>√, ⁴√ -> <sup>4</sup>√, ³ -> <sup>3</sup>,
  ₁ -> <sub>1</sub>, a/b -> a stacked fraction,
  ÷ -> &divide;, × -> &times;, ± -> &plusmn;, ≠ -> &ne;, ≤ -> &le;, ≥ -> &ge;.

Document rules:
1. Include DOCTYPE, html (lang="ko"), head with UTF-8 charset and a viewport
   meta tag, and body.
2. Embed a readable, responsive stylesheet (media queries for narrow screens).
3. Show each problem with its question, choices, answer and solution steps.
4. Highlight the correct choice (background colour and a check mark).
5. Show metadata (page size, processing time, confidence) at the bottom.
6. Use semantic HTML with adequate colour contrast.

Return only the HTML document.
"""

RENDER_USER = "Render the following standard JSON (v1.1.0) problem object as HTML:\n\n{json}"


def _read(path: Optional[Path], default: str) -> str:
    if path is None:
        return default
    return Path(path).read_text(encoding="utf-8")


def ocr_system_prompt(settings: Settings) -> str:
    return _read(settings.ocr_system_prompt_file, OCR_SYSTEM)


def ocr_user_prompt(settings: Settings, width=None, height=None, image_url: str = "example.url") -> str:
    """Fill the user template with what we know about the upload."""
    return (
        _read(settings.ocr_user_prompt_file, OCR_USER)
        .replace("{{image_url}}", image_url)
        .replace("{{width}}", str(width or "unknown"))
        .replace("{{height}}", str(height or "unknown"))
    )


def render_system_prompt(settings: Settings) -> str:
    return _read(settings.render_system_prompt_file, RENDER_SYSTEM)


def render_user_prompt(json_text: str) -> str:
    return RENDER_USER.replace("{json}", json_text)
