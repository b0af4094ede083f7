"""Event models for the in-process event system."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict
from uuid import UUID, uuid4

MISSING_TRANSLATION_EVENT = "i18n.missing.translation"


@dataclass
class Event:
    """Base class for all events in the system.

    Events are records of something that happened, used for
    notifications and cross-module communication.
    """

    event_type: str
    """The type of event (e.g., 'i18n.missing.translation')."""

    timestamp: datetime = field(default_factory=datetime.now)
    """When the event occurred."""

    correlation_id: UUID = field(default_factory=uuid4)
    """Unique ID to track related events across the system."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    """Custom metadata for this event type."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary.

        Returns:
            Dictionary representation of the event with ISO format timestamp
            and UUID as string.
        """
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        data["correlation_id"] = str(self.correlation_id)
        return data

    def __hash__(self) -> int:
        """Hash based on correlation_id and timestamp."""
        return hash((self.correlation_id, self.timestamp))


def missing_translation_event(
    identifier: str, locale: str, has_fallback: bool
) -> Event:
    """Build the event emitted when a key is absent from a locale.

    Args:
        identifier: Translation key that was looked up.
        locale: Locale the key was looked up in.
        has_fallback: Whether the fallback locale provided the message.

    Returns:
        Event of type MISSING_TRANSLATION_EVENT.
    """
    return Event(
        event_type=MISSING_TRANSLATION_EVENT,
        metadata={
            "identifier": identifier,
            "locale": locale,
            "has_fallback": has_fallback,
        },
    )
