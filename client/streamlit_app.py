# client/streamlit_app.py
import streamlit as st
import api as API
from images import ACCEPTED_TYPES, prepare_upload
from components import show_json, show_problems, show_html, download_json, divider

st.set_page_config(page_title="Exam OCR Demo", layout="wide")
st.title("🧮 Exam OCR Demo")

# ------------------------
# Session state
# ------------------------
DEFAULTS = {"upload_key": None, "image": None, "metadata": None, "json_result": None, "html_result": None, "has_processed": False}
for k, v in DEFAULTS.items():
    st.session_state.setdefault(k, v)

def _reset():
    for k, v in DEFAULTS.items():
        st.session_state[k] = v
    try:
        API.demo_reset()
    except Exception as e:
        st.warning(f"Server-side reset failed: {e}")

with st.sidebar:
    st.header("Settings")
    st.text_input("API Base URL (from env)", value=API.API, disabled=True)
    if st.button("Health check"):
        try:
            st.success(API.healthz())
        except Exception as e:
            st.error(f"Health check failed: {e}")
    st.button("🔄 Reset", on_click=_reset)
    st.caption("⚠️ The demo sends one image per session. Reset to start over.")

left, right = st.columns(2)

# ------------------------
# 1. Upload
# ------------------------
with left:
    st.subheader("1. Problem image")
    up = st.file_uploader("PNG, JPEG, GIF or WebP, up to 10MB", type=ACCEPTED_TYPES)
    if up is not None and st.session_state.upload_key != (up.name, up.size):
        st.session_state.upload_key = (up.name, up.size)
        try:
            st.session_state.image, st.session_state.metadata = prepare_upload(up.getvalue())
        except Exception as e:
            st.error(f"Could not read the image: {e}")
    if st.session_state.image and up is not None:
        st.image(up)
        m = st.session_state.metadata
        st.caption(f"{m['width']}×{m['height']} px · {m['size'] / 1024 / 1024:.2f}MB · {m['type']}")

    send_disabled = st.session_state.image is None or st.session_state.has_processed
    if st.button("🚀 Send", disabled=send_disabled, type="primary"):
        with st.spinner("Analysing the image..."):
            try:
                res = API.ocr(st.session_state.image, st.session_state.metadata)
                if not (res.get("success") and res.get("data")):
                    raise RuntimeError(res.get("error") or "Unexpected OCR response.")
                st.session_state.json_result = res["data"]
                st.session_state.has_processed = True
            except Exception as e:
                st.error(f"Processing failed: {e}")
    if st.session_state.has_processed and st.session_state.json_result is None:
        st.warning("The demo allows one call. Reset and try again.")

# ------------------------
# 2. JSON and 3. HTML
# ------------------------
with right:
    st.subheader("2. JSON result")
    data = st.session_state.json_result
    if data is None:
        st.info("💡 Upload an image and click **Send** to start.")
    else:
        show_problems(data)
        show_json(data, caption="Full result")
        download_json(data)

        divider("3. HTML rendering")
        if st.button("🖼️ Render HTML"):
            with st.spinner("Rendering..."):
                try:
                    res = API.render(data)
                    if not (res.get("success") and res.get("html")):
                        raise RuntimeError(res.get("error") or "Unexpected render response.")
                    st.session_state.html_result = res["html"]
                except Exception as e:
                    st.error(f"HTML rendering failed: {e}")
        if st.session_state.html_result:
            show_html(st.session_state.html_result)
            st.download_button("⬇️ Download HTML", data=st.session_state.html_result,
                               file_name="problem.html", mime="text/html")
            st.success("✨ All done!")
