"""
Service layer between the Flask routes and the calculator engine.

Validates request payloads and shapes engine snapshots into JSON bodies.
"""

from typing import Dict, List, Optional

from ..calc_types import DisplayState
from ..errors import InvalidKeyError
from ..evaluator import evaluate
from ..tokens import KEYS


def extract_keys(data: Dict) -> List[str]:
    """
    Pull the key labels out of a key-press payload.

    Accepts {"key": "7"} or {"keys": ["1", "+", "2"]}.

    Raises:
        ValueError: If neither field is present or the shape is wrong
        InvalidKeyError: If any label is not a keypad key
    """
    if "keys" in data:
        keys = data["keys"]
        if not isinstance(keys, list):
            raise ValueError("keys must be a list of key labels")
    elif "key" in data:
        keys = [data["key"]]
    else:
        raise ValueError("key or keys is required")
    return validate_keys(keys)


def validate_keys(keys: List) -> List[str]:
    """Check every label before any is applied, so a bad batch changes nothing."""
    for key in keys:
        if not isinstance(key, str) or key not in KEYS:
            raise InvalidKeyError(str(key))
    return list(keys)


def state_payload(state: DisplayState, session_id: Optional[str] = None) -> Dict:
    payload = state.to_dict()
    if session_id is not None:
        payload["session_id"] = session_id
    return payload


def evaluate_expression(expression: str) -> Dict:
    """
    Evaluate a space-separated expression for the one-shot endpoint.

    Args:
        expression: Text such as "2 + 3 * 4"

    Returns:
        Dict with 'expression' and 'result' keys
    """
    return {"expression": expression, "result": evaluate(expression)}
