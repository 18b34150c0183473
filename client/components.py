# client/components.py
import json
import streamlit as st
import streamlit.components.v1 as st_components
import pandas as pd

def show_json(obj, caption: str | None = None):
    if caption:
        st.caption(caption)
    st.json(obj, expanded=True)

def display_text(node: dict) -> str:
    """Prefer the server's LaTeX rendering of a field; fall back to the raw text."""
    return node.get("text_latex") or node.get("text") or ""

def show_problems(data):
    """One table per problem: question and choices, LaTeX form first."""
    problems = data.get("problems") if isinstance(data, dict) else None
    if not isinstance(problems, list):
        st.info("No problems found in the result.")
        return
    for p in problems:
        if not isinstance(p, dict):
            continue
        st.markdown(f"**{p.get('id', 'problem')}** · {p.get('type', '')}")
        q = p.get("question")
        if isinstance(q, dict):
            st.code(display_text(q), language="latex")
        choices = [c for c in p.get("choices") or [] if isinstance(c, dict)]
        if choices:
            rows = [{"id": c.get("id"), "text": c.get("text"), "latex": display_text(c)} for c in choices]
            st.dataframe(pd.DataFrame(rows), hide_index=True)
        if p.get("answer"):
            st.caption(f"Answer: {p['answer']}")

def show_html(html: str, height: int = 600):
    """Rendered preview in a sandboxed iframe, plus the source."""
    st_components.html(html, height=height, scrolling=True)
    with st.expander("HTML source"):
        st.code(html, language="html")

def download_json(obj, file_name="ocr_result.json"):
    st.download_button("⬇️ Download JSON", data=json.dumps(obj, indent=2, ensure_ascii=False),
                       file_name=file_name, mime="application/json")

def divider(label: str = ""):
    st.markdown(f"---\n**{label}**" if label else "---")
