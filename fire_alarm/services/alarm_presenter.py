"""Alarm presenter - blinking display and buzzer pattern while alarming"""

import asyncio
import logging
from typing import Optional
from ..controllers.buzzer import BuzzerController, ALARM_VOLUME, ALARM_TONE_HZ
from ..controllers.display import DisplayController
from ..models import AlarmSignal, PresenterState
from ..utils.event_bus import EventBus, Subscription

logger = logging.getLogger(__name__)

ALERT_LINE = 1


class AlarmPresenter:
    """
    Visual/audible side of the alarm.

    IDLE -> BLINKING on ALARM_START: red backlight, "fire detected!" on the
    second line and the buzzer sounding, then a blink task alternates
    white/silent and red/buzzing every blink interval.

    BLINKING -> IDLE on ALARM_CLEAR: observed through a one-shot subscription
    taken on entry, so each alarm episode owns exactly one clear handler.
    """

    def __init__(self, bus: EventBus, display: DisplayController,
                 buzzer: BuzzerController, blink_interval: float):
        self.bus = bus
        self.display = display
        self.buzzer = buzzer
        self.blink_interval = blink_interval

        self.state = PresenterState.IDLE
        self._blink_task: Optional[asyncio.Task] = None
        self._clear_subscription: Optional[Subscription] = None
        logger.info("Alarm presenter initialized")

    @property
    def is_blinking(self) -> bool:
        return self.state is PresenterState.BLINKING

    def buzz(self):
        """Sound the alarm tone"""
        self.buzzer.set_volume(ALARM_VOLUME)
        self.buzzer.play(ALARM_TONE_HZ)

    def stop_buzzing(self):
        """Silence the buzzer"""
        self.buzzer.stop()
        self.buzzer.stop()  # a single stop can leave the buzzer faintly sounding

    def reset(self):
        """Return display and buzzer to their idle state"""
        try:
            self.display.color("white")
            self.display.message("", ALERT_LINE)
        finally:
            # The buzzer must go quiet even when the LCD write fails
            self.stop_buzzing()

    def start_alarm(self, _payload=None):
        """ALARM_START handler"""
        if self.is_blinking:
            logger.debug("Alarm already presenting; ignoring duplicate start")
            return

        logger.warning("Fire detected - starting alarm pattern")
        self.state = PresenterState.BLINKING

        self.display.color("red")
        self.display.message("fire detected!", ALERT_LINE)
        self.buzz()

        self._blink_task = asyncio.create_task(self._blink_loop())
        self._clear_subscription = self.bus.once(AlarmSignal.ALARM_CLEAR, self.stop_alarm)

    def stop_alarm(self, _payload=None):
        """ALARM_CLEAR handler; also used on shutdown"""
        if self._clear_subscription is not None:
            self._clear_subscription.cancel()
            self._clear_subscription = None

        self.cancel_blink()

        if self.is_blinking:
            logger.info("Alarm cleared - restoring idle display")
        self.state = PresenterState.IDLE
        self.reset()

    def cancel_blink(self):
        """Stop the blink task; no-op when none is running"""
        task, self._blink_task = self._blink_task, None
        if task is not None and not task.done():
            task.cancel()

    async def _blink_loop(self):
        tick = True
        while True:
            await asyncio.sleep(self.blink_interval)
            try:
                if tick:
                    self.display.color("white")
                    self.stop_buzzing()
                else:
                    self.display.color("red")
                    self.buzz()
            except Exception as e:
                logger.error(f"Error in blink loop: {e}")
            tick = not tick
