"""Contract for activity sources.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The CLI depends on this abstraction; tests and alternative hosts can plug
  in any object with the same `fetch_events` coroutine.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import FetchResult


@runtime_checkable
class ActivitySource(Protocol):
    """Minimal contract for fetching one page of public events.

    Design rules:
    - `fetch_events` is async because it performs I/O (HTTP).
    - Failures are returned as tagged values, not raised.
    """

    async def fetch_events(self, account: str, page_limit: int) -> FetchResult:
        """Fetch up to `page_limit` recent events for `account`."""

        ...
