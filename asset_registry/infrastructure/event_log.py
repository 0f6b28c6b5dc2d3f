"""Event Log — in-memory sink for registry notifications.

Invariants:
    - Events appended in emission order (emission happens only after commit)
    - Bounded: oldest events dropped once max_events is reached
    - Every event also logged at INFO with its fields as extras
"""

import logging
from collections import deque

from asset_registry.core.events import Created, RegistryEvent

logger = logging.getLogger(__name__)


class EventLog:
    """Records notifications for the read API (an EventSink)."""

    def __init__(self, max_events: int = 1_000):
        self._events: deque[RegistryEvent] = deque(maxlen=max_events)

    def emit(self, event: RegistryEvent) -> None:
        self._events.append(event)
        payload = event.to_dict()
        if isinstance(event, Created):
            logger.info(
                "Asset created",
                extra={"identity": payload["identity"], "owner": payload["owner"]},
            )
        else:
            logger.info(
                "Asset transferred",
                extra={
                    "identity": payload["identity"],
                    "owner": payload["from"],
                    "recipient": payload["to"],
                },
            )

    def recent(self, limit: int = 50) -> list[RegistryEvent]:
        if limit <= 0:
            return []
        return list(self._events)[-limit:]

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
