import json
from typing import Any, Optional

PAIRS = (("{", "}"), ("[", "]"))


def _loads(text: str) -> Optional[Any]:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, ValueError):
        return None


def parse_model_json(text: Optional[str]) -> Optional[Any]:
    """Best-effort JSON decoding of a model reply.

    Strict parse first. Failing that, take the bracket that opens first in
    the reply, ``{`` or ``[``, and parse the slice up to the last matching
    closer; if that slice is not JSON, try the other bracket the same way.
    Returns None when nothing yields JSON.
    """
    if not text:
        return None
    text = text.strip()

    parsed = _loads(text)
    if parsed is not None:
        return parsed

    candidates = []
    for opener, closer in PAIRS:
        start = text.find(opener)
        end = text.rfind(closer)
        if start != -1 and end > start:
            candidates.append((start, text[start:end + 1]))

    # Braces can sit inside array items (Excel array formulas), so the outer
    # container is whichever bracket opens first.
    for _, fragment in sorted(candidates):
        parsed = _loads(fragment)
        if parsed is not None:
            return parsed
    return None
