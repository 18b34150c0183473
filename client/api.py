import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session(); S.headers.update({"Content-Type":"application/json"})

OCR_TIMEOUT = 60     # vision call on a full page
RENDER_TIMEOUT = 30

class ApiError(RuntimeError):
    """Non-2xx answer from the backend, with its error message pulled out."""

def _check(r):
    if r.ok:
        return r.json()
    try:
        body = r.json()
        msg = body.get("error") or body.get("detail") or r.text
    except ValueError:
        msg = r.text
    raise ApiError(f"API call failed ({r.status_code}): {msg}")

def healthz():   r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()
def ocr(image_data: str, metadata: dict | None = None):
    body = {"imageData": image_data, "imageMetadata": metadata or {}}
    return _check(S.post(f"{API}/api/ocr", json=body, timeout=OCR_TIMEOUT))
def render(json_data):
    return _check(S.post(f"{API}/api/render", json={"jsonData": json_data}, timeout=RENDER_TIMEOUT))
def demo_reset():
    r=S.post(f"{API}/api/demo/reset",timeout=10); r.raise_for_status(); return r.json()
