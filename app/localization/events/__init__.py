"""In-process event system.

Usage:

    from localization.events import Event, register_event_handler, dispatch_event

    @register_event_handler("i18n.missing.translation")
    def log_missing(event: Event) -> None:
        ...

    dispatch_event(Event(event_type="i18n.missing.translation"))
"""

from localization.events.dispatcher import (
    clear_handlers,
    dispatch_event,
    get_handlers_for_event,
    get_registered_events,
    register_event_handler,
)
from localization.events.models import (
    MISSING_TRANSLATION_EVENT,
    Event,
    missing_translation_event,
)

__all__ = [
    "Event",
    "MISSING_TRANSLATION_EVENT",
    "missing_translation_event",
    "dispatch_event",
    "register_event_handler",
    "get_registered_events",
    "get_handlers_for_event",
    "clear_handlers",
]
