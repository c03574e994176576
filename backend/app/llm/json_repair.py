import json
import re
from typing import Any, Optional

_FENCE = re.compile(r"```[A-Za-z0-9_-]*")
_OBJECT_SPAN = re.compile(r"\{[\s\S]*\}")


def _loads(text: str) -> Optional[Any]:
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return None


def repair(raw_text: str) -> Optional[Any]:
    """
    Turn loosely formatted model output into parsed JSON.
    Tries, in order:
      1. the text as-is
      2. the text with ``` fences (and language tags) removed
      3. the greedy span from the first "{" to the last "}"
    Returns None if nothing parses.
    """
    if not isinstance(raw_text, str):
        return None

    parsed = _loads(raw_text)
    if parsed is not None:
        return parsed

    parsed = _loads(_FENCE.sub("", raw_text).strip())
    if parsed is not None:
        return parsed

    m = _OBJECT_SPAN.search(raw_text)
    if m:
        return _loads(m.group(0))
    return None
