import re

def extract_fenced_block(text: str, lang: str) -> str:
    """
    Pull the body out of a Markdown code block anywhere in `text`.
    Tries ```<lang> first, then a bare ```; returns the trimmed text if neither is there.
    """
    m = re.search(rf"```{re.escape(lang)}\s*(.*?)\s*```", text, flags=re.S)
    if m is None:
        m = re.search(r"```\s*(.*?)\s*```", text, flags=re.S)
    return m.group(1) if m else text.strip()

def strip_code_fence(text: str, lang: str) -> str:
    """Drop a fence wrapping the whole of `text` (```<lang> ... ``` or ``` ... ```)."""
    out = text.strip()
    if out.startswith(f"```{lang}"):
        out = re.sub(rf"^```{re.escape(lang)}\s*", "", out)
    elif out.startswith("```"):
        out = re.sub(r"^```\s*", "", out)
    else:
        return out
    return re.sub(r"\s*```$", "", out)
