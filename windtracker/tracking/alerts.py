# ABOUTME: Throttle for "wind building" notifications
# ABOUTME: The caller owns the last-alert state; the tracker only supplies building/ETA

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

DEFAULT_COOLDOWN = timedelta(minutes=5)


def should_alert(
    building: bool,
    eta: Optional[int],
    last_alert_at: Optional[datetime],
    now: datetime,
    cooldown: timedelta = DEFAULT_COOLDOWN,
) -> bool:
    """
    Decide whether a new "wind building" notice may be raised.

    True when upstream is building with a known ETA and either no notice
    was raised yet or the cooldown has elapsed since the last one.
    """
    if not building or eta is None:
        return False
    if last_alert_at is None:
        return True
    return now - last_alert_at >= cooldown


@dataclass
class AlertThrottle:
    """Last-alert timestamp held by the notification side"""
    cooldown: timedelta = DEFAULT_COOLDOWN
    last_alert_at: Optional[datetime] = None

    def check(self, building: bool, eta: Optional[int], now: Optional[datetime] = None) -> bool:
        """
        Returns True (and records the alert) when a notice should be raised.
        """
        now = now or datetime.now(timezone.utc)
        if not should_alert(building, eta, self.last_alert_at, now, self.cooldown):
            return False
        self.last_alert_at = now
        return True
