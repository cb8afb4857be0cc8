"""
JSON Schema Checker

Validates JSON documents against named schema profiles:

- bundled profiles shipped in utility/data/ (e.g. "GS1WebVocab")
- extra *.json profiles found in OT_SCHEMA_DIR, keyed by file stem
- http(s) schema URLs, downloaded once and cached for the process

Errors are reported as "<json path> :: <message>" strings, in document order,
without duplicates.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import requests
from jsonschema import Draft7Validator

from utility.config import SCHEMA_DIR, SCHEMA_TIMEOUT

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

BUNDLED_PROFILES = {
    "GS1WebVocab": "gs1_web_vocab_schema.json",
}

_schema_cache: Dict[str, Dict[str, Any]] = {}
_lock = threading.Lock()


def _load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _resolve_schema(profile: str, schema_dir: Optional[Path]) -> Dict[str, Any]:
    if profile in BUNDLED_PROFILES:
        return _load_json(DATA_DIR / BUNDLED_PROFILES[profile])

    if schema_dir is not None:
        candidate = schema_dir / f"{profile}.json"
        if candidate.exists():
            return _load_json(candidate)

    if profile.startswith(("http://", "https://")):
        logger.info(f"Downloading JSON schema {profile}")
        response = requests.get(profile, timeout=SCHEMA_TIMEOUT)
        response.raise_for_status()
        return response.json()

    raise ValueError(f"Unknown JSON schema profile: {profile}")


def load_schema(profile: str, schema_dir: Optional[Path] = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Return the schema for a profile, loading it on first use.

    Args:
        profile: Bundled profile name, schema file stem, or schema URL
        schema_dir: Directory searched for extra profiles

    Raises:
        ValueError: If the profile cannot be found
    """
    with _lock:
        schema = _schema_cache.get(profile)
        if schema is None:
            schema = _resolve_schema(profile, schema_dir)
            _schema_cache[profile] = schema
        return schema


def _format_path(path) -> str:
    return "$" + "".join(f"[{p}]" if isinstance(p, int) else f".{p}" for p in path)


def is_valid(json_str: str, profile: str) -> Tuple[bool, List[str]]:
    """
    Validate a JSON document against a schema profile.

    Args:
        json_str: JSON document text
        profile: Schema profile name or URL

    Returns:
        Tuple of (is_valid: bool, errors: list of str)

    Example:
        >>> is_valid('{"@context": {}, "@id": "urn:epc:id:party:x"}', "GS1WebVocab")
        (True, [])
    """
    schema = load_schema(profile)

    try:
        document = json.loads(json_str)
    except json.JSONDecodeError as e:
        return False, [f"$ :: Invalid JSON: {e}"]

    validator = Draft7Validator(schema)
    errors: List[str] = []
    for error in sorted(validator.iter_errors(document), key=lambda err: [str(p) for p in err.absolute_path]):
        message = f"{_format_path(error.absolute_path)} :: {error.message}"
        if message not in errors:
            errors.append(message)

    return not errors, errors
