# app/samples.py
# Canned OCR result served when the upload is the "test" marker, so the UI
# can be exercised without spending model calls.
from typing import Any, Dict, Optional

SAMPLE_MARKER = "test"


def is_sample_request(image_data: str) -> bool:
    # exact match: real base64 payloads contain "test" often enough
    return image_data.strip() == SAMPLE_MARKER


def sample_problem(width: Optional[int] = None, height: Optional[int] = None) -> Dict[str, Any]:
    """A fresh copy of the demo problem (radicals, ÷ and ×), not yet normalized."""
    return {
        "version": "1.1.0",
        "problems": [
            {
                "id": "prob_016",
                "type": "multiple_choice",
                "question": {
                    "text": "a>0일 때, ³√(√a/⁴√a) ÷ ⁴√(√a/³√a) × ⁴√(⁴√a/³√a)를 간단히 하면?",
                    "coordinates": {"x": 80, "y": 120, "width": 520, "height": 80},
                },
                "choices": [
                    {"id": "1", "text": "1", "coordinates": {"x": 80, "y": 250, "width": 60, "height": 30}},
                    {"id": "2", "text": "√a", "coordinates": {"x": 200, "y": 250, "width": 80, "height": 30}},
                    {"id": "3", "text": "³√a", "coordinates": {"x": 320, "y": 250, "width": 80, "height": 30}},
                    {"id": "4", "text": "⁴√a", "coordinates": {"x": 80, "y": 290, "width": 80, "height": 30}},
                    {"id": "5", "text": "¹²√a", "coordinates": {"x": 200, "y": 290, "width": 80, "height": 30}},
                ],
                "answer": "4",
                "solution": {
                    "steps": [
                        "지수 법칙을 이용하여 근호를 지수로 표현",
                        "a^(1/2) / a^(1/4) = a^(1/2-1/4) = a^(1/4)",
                        "a^(1/2) / a^(1/3) = a^(1/2-1/3) = a^(1/6)",
                        "a^(1/4) / a^(1/3) = a^(1/4-1/3) = a^(-1/12)",
                        "최종 계산: (a^(1/4))^(1/3) ÷ (a^(1/6))^(1/4) × (a^(-1/12))^(1/4) = a^(1/4)",
                    ],
                    "correct_answer": "⁴√a",
                },
            }
        ],
        "metadata": {
            "page_width_px": width or 800,
            "page_height_px": height or 600,
            "processing_time": "0.5s",
            "confidence": 0.95,
        },
    }
