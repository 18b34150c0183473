from typing import Any, Dict

from fastapi import APIRouter, Body

from app.timeutil import now_iso

router = APIRouter(prefix="/api", tags=["status"])

API_VERSION = "1.0.0"


@router.get("")
def api_status() -> Dict[str, Any]:
    return {"message": "Exam OCR API is up.", "timestamp": now_iso(), "version": API_VERSION}


@router.post("")
def api_echo(payload: Any = Body(None)) -> Dict[str, Any]:
    """Echo the body back; handy for checking the client wiring."""
    return {"message": "POST received", "receivedData": payload, "timestamp": now_iso()}
