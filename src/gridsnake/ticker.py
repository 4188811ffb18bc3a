# ticker.py
import logging

import pygame  # type: ignore

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class PygameTicker:
    """
    Periodic tick source backed by pygame's timer: while active, a
    TICK_EVENT is posted to the event queue every `interval_ms`.
    pygame keeps a single timer per event type, so restarting replaces
    the previous one rather than stacking a second.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.active = False

    def start(self, interval_ms: int) -> None:
        self.cancel()
        pygame.time.set_timer(self.event_type, interval_ms)
        self.active = True
        logger.debug("tick timer started (%d ms)", interval_ms)

    def cancel(self) -> None:
        if not self.active:
            return
        pygame.time.set_timer(self.event_type, 0)
        # drop ticks that were queued before the cancel
        pygame.event.clear(self.event_type)
        self.active = False
        logger.debug("tick timer cancelled")
