"""
In-process event bus used to fan alarm signals out to subscribers.

Callbacks run synchronously on the caller's thread (the asyncio loop thread),
in subscription order, so a handler always runs to completion before the
next one starts.
"""

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, Hashable, List, Optional

logger = logging.getLogger(__name__)


class Subscription:
    """Handle returned by EventBus.on/once; cancel() detaches the callback"""

    def __init__(self, bus: "EventBus", event: Hashable, callback: Callable[..., None], once: bool = False):
        self._bus = bus
        self.event = event
        self.callback = callback
        self.once = once
        self.active = True

    def cancel(self):
        """Detach from the bus. Calling it again is a no-op."""
        if not self.active:
            return
        self.active = False
        self._bus._remove(self)

    def __repr__(self):
        kind = "once" if self.once else "on"
        return f"<Subscription {kind} {self.event!r} active={self.active}>"


class EventBus:
    """Publish/subscribe routing table with persistent and one-shot listeners"""

    def __init__(self):
        self._subscribers: Dict[Hashable, List[Subscription]] = defaultdict(list)

    def on(self, event: Hashable, callback: Callable[..., None]) -> Subscription:
        """Subscribe callback to every future emission of event"""
        return self._add(Subscription(self, event, callback))

    def once(self, event: Hashable, callback: Callable[..., None]) -> Subscription:
        """Subscribe callback to the next emission of event only"""
        return self._add(Subscription(self, event, callback, once=True))

    def emit(self, event: Hashable, payload: Optional[Any] = None) -> int:
        """
        Call every subscriber of event with payload.

        Subscribers are taken from a snapshot, so one added during this
        emission waits for the next one. A subscription cancelled by an
        earlier callback is skipped. One-shot subscriptions are detached just
        before their callback runs. A failing callback is logged and does not
        stop the others.

        Returns:
            Number of callbacks invoked.
        """
        invoked = 0
        for subscription in list(self._subscribers.get(event, [])):
            if not subscription.active:
                continue
            if subscription.once:
                subscription.cancel()
            invoked += 1
            try:
                subscription.callback(payload)
            except Exception as e:
                logger.error(f"Error in subscriber for {event}: {e}", exc_info=True)
        return invoked

    def subscriber_count(self, event: Hashable) -> int:
        return len(self._subscribers.get(event, []))

    def _add(self, subscription: Subscription) -> Subscription:
        self._subscribers[subscription.event].append(subscription)
        return subscription

    def _remove(self, subscription: Subscription):
        subscriptions = self._subscribers.get(subscription.event, [])
        try:
            subscriptions.remove(subscription)
        except ValueError:
            return
