"""JSON export of the raw event list.

Why JSON passthrough:
- Interoperability with jq and other pipelines.
- Events are written exactly as received: same fields, same key order.
"""

from __future__ import annotations

import json
from typing import Any


def dumps_events(events: Any) -> str:
    """Serialize `events` with stable 2-space indentation.

    Falls back to `str(events)` when the value is not JSON-serializable.
    """

    try:
        return json.dumps(events, ensure_ascii=False, indent=2)
    except (TypeError, ValueError):
        return str(events)
