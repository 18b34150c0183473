# client/images.py
import base64, io
from PIL import Image

ACCEPTED_TYPES = ["png", "jpg", "jpeg", "gif", "webp"]
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
COMPRESS_OVER_BYTES = 2 * 1024 * 1024
MAX_SIZE = (1920, 1080)
JPEG_QUALITY = 80

def prepare_upload(raw: bytes):
    """
    Turn an uploaded file into (data_url, metadata).
    Anything over 2MB is shrunk to fit 1920x1080 and re-encoded as JPEG.
    """
    if len(raw) > MAX_UPLOAD_BYTES:
        raise ValueError("File is larger than 10MB.")
    img = Image.open(io.BytesIO(raw))
    width, height = img.size
    if len(raw) > COMPRESS_OVER_BYTES:
        img = img.convert("RGB")
        img.thumbnail(MAX_SIZE)  # keeps aspect ratio, never upscales
        width, height = img.size
        buf = io.BytesIO()
        img.save(buf, format="JPEG", quality=JPEG_QUALITY)
        raw, mime = buf.getvalue(), "image/jpeg"
    else:
        mime = Image.MIME.get(img.format, "image/jpeg")
    data_url = f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"
    return data_url, {"width": width, "height": height, "size": len(raw), "type": mime}
