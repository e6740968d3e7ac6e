# ABOUTME: Tests for the "wind building" alert throttle
# ABOUTME: Validates cooldown handling and caller-owned last-alert state

from datetime import datetime, timedelta, timezone

from windtracker.tracking.alerts import AlertThrottle, should_alert

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TestShouldAlert:
    """Tests for should_alert"""

    def test_first_alert_fires(self):
        assert should_alert(True, 79, None, NOW) is True

    def test_requires_building(self):
        assert should_alert(False, 79, None, NOW) is False

    def test_requires_eta(self):
        assert should_alert(True, None, None, NOW) is False

    def test_suppressed_inside_cooldown(self):
        last = NOW - timedelta(minutes=4, seconds=59)
        assert should_alert(True, 79, last, NOW) is False

    def test_fires_once_cooldown_elapsed(self):
        last = NOW - timedelta(minutes=5)
        assert should_alert(True, 79, last, NOW) is True

    def test_custom_cooldown(self):
        last = NOW - timedelta(minutes=2)
        assert should_alert(True, 79, last, NOW, cooldown=timedelta(minutes=1)) is True


class TestAlertThrottle:
    """Tests for AlertThrottle"""

    def test_records_time_when_firing(self):
        throttle = AlertThrottle()

        assert throttle.check(True, 79, now=NOW) is True
        assert throttle.last_alert_at == NOW

    def test_throttles_repeat_alerts(self):
        throttle = AlertThrottle()
        throttle.check(True, 79, now=NOW)

        assert throttle.check(True, 75, now=NOW + timedelta(minutes=1)) is False
        assert throttle.last_alert_at == NOW
        assert throttle.check(True, 70, now=NOW + timedelta(minutes=5)) is True

    def test_no_record_when_not_building(self):
        throttle = AlertThrottle()

        assert throttle.check(False, None, now=NOW) is False
        assert throttle.last_alert_at is None
