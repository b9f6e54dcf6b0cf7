"""
Helpers for turning free-form model replies into validated verdict data.

The model is asked for strict JSON but frequently wraps it in markdown
code fences or adds a sentence around it.
"""

import json
import re
from typing import List


VERDICT_LABELS = {
    "true": "True",
    "false": "False",
    "partially true": "Partially True",
    "partly true": "Partially True",
    "partial": "Partially True",
    "mixed": "Partially True",
}


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` markers and surrounding whitespace."""
    return re.sub(r"```(?:json)?", "", text or "", flags=re.IGNORECASE).strip()


def extract_json(text: str) -> dict:
    """
    Parse a JSON object out of a model reply.

    Args:
        text (str): Raw model output

    Returns:
        dict: Parsed JSON object

    Raises:
        ValueError: If no JSON object can be parsed
    """
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise ValueError("Model returned an empty response")

    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError:
        # Extract JSON from response (in case there's extra text)
        json_match = re.search(r"\{.*\}", cleaned, re.DOTALL)
        if not json_match:
            raise ValueError("No JSON object found in model response")
        try:
            payload = json.loads(json_match.group())
        except json.JSONDecodeError as e:
            raise ValueError(f"Malformed JSON in model response: {e}")

    if not isinstance(payload, dict):
        raise ValueError("Model response is not a JSON object")

    return payload


def normalize_verdict(value) -> str:
    if not isinstance(value, str):
        raise ValueError(f"Invalid verdict: {value!r}")

    key = re.sub(r"[\s_\-]+", " ", value).strip().lower()
    if key not in VERDICT_LABELS:
        raise ValueError(f"Invalid verdict: {value!r}")
    return VERDICT_LABELS[key]


def normalize_confidence(value) -> float:
    """Coerce a confidence value to a number in [0, 100]."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid confidence: {value!r}")

    if isinstance(value, str):
        value = value.strip().rstrip("%").strip()
        try:
            value = float(value)
        except ValueError:
            raise ValueError(f"Invalid confidence: {value!r}")

    if not isinstance(value, (int, float)) or value != value:
        raise ValueError(f"Invalid confidence: {value!r}")

    return float(min(max(value, 0), 100))


def parse_verdict(payload: dict) -> dict:
    """
    Validate the verdict fields of a parsed model reply.

    Returns:
        dict: {"verdict", "confidence", "summary"}

    Raises:
        ValueError: If any field is missing or invalid
    """
    summary = payload.get("summary")
    if not isinstance(summary, str):
        raise ValueError("Model response is missing a summary")

    return {
        "verdict": normalize_verdict(payload.get("verdict")),
        "confidence": normalize_confidence(payload.get("confidence")),
        "summary": summary.strip(),
    }


def parse_evidence_list(value) -> List[dict]:
    """
    Read a model-reported evidence list, dropping malformed items.

    Each item must carry a source URL ('source' or 'url') and a quote
    ('text', 'quote' or 'snippet').
    """
    if not isinstance(value, list):
        return []

    items = []
    for raw in value:
        if not isinstance(raw, dict):
            continue
        source = raw.get("source") or raw.get("url")
        text = raw.get("text") or raw.get("quote") or raw.get("snippet")
        if isinstance(source, str) and source.strip() and isinstance(text, str) and text.strip():
            items.append({"source": source.strip(), "text": text.strip()})
    return items
