"""
Tests for notifications and the notification bus.
"""

from unittest.mock import Mock

from rich.console import Console

from struts2scaffold.notifications import (
    HyperlinkEvent,
    HyperlinkEventType,
    LoggingNotificationSink,
    Notification,
    NotificationBus,
    RichNotificationSink,
)

CONTENT = 'Struts 2 Facet has been created, please <a href="more">setup fileset(s)</a>'


class TestNotification:
    """Tests for Notification."""

    def test_links_and_plain_text(self):
        notification = Notification("struts2", "Struts 2 Setup", CONTENT)
        assert notification.links == ["more"]
        assert notification.plain_text == "Struts 2 Facet has been created, please setup fileset(s)"

    def test_activate_calls_listener(self):
        listener = Mock()
        notification = Notification("struts2", "Struts 2 Setup", CONTENT, listener=listener)

        assert notification.activate() is True
        listener.assert_called_once()
        _, event = listener.call_args[0]
        assert event == HyperlinkEvent("more", HyperlinkEventType.ACTIVATED)

    def test_expired_notification_ignores_events(self):
        listener = Mock()
        notification = Notification("struts2", "Struts 2 Setup", CONTENT, listener=listener)
        notification.expire()

        assert notification.activate() is False
        listener.assert_not_called()

    def test_activate_without_links(self):
        notification = Notification("struts2", "Struts 2 Setup", "plain", listener=Mock())
        assert notification.activate() is False


class TestNotificationBus:
    """Tests for NotificationBus."""

    def test_delivers_to_all_sinks(self):
        bus = NotificationBus()
        first, second = Mock(), Mock()
        bus.subscribe(first)
        bus.subscribe(second)

        notification = Notification("struts2", "Struts 2 Setup", CONTENT)
        bus.notify(notification)

        first.notify.assert_called_once_with(notification)
        second.notify.assert_called_once_with(notification)
        assert bus.history == [notification]

    def test_failing_sink_does_not_stop_others(self):
        bus = NotificationBus()
        broken = Mock()
        broken.notify.side_effect = RuntimeError("display gone")
        healthy = Mock()
        bus.subscribe(broken)
        bus.subscribe(healthy)

        bus.notify(Notification("struts2", "Struts 2 Setup", CONTENT))
        healthy.notify.assert_called_once()

    def test_disabled_bus_records_but_does_not_deliver(self):
        bus = NotificationBus(enabled=False)
        sink = Mock()
        bus.subscribe(sink)

        bus.notify(Notification("struts2", "Struts 2 Setup", CONTENT))
        sink.notify.assert_not_called()
        assert len(bus.history) == 1

    def test_active_excludes_expired(self):
        bus = NotificationBus()
        first = Notification("struts2", "A", CONTENT)
        second = Notification("struts2", "B", CONTENT)
        bus.notify(first)
        bus.notify(second)
        first.expire()
        assert bus.active() == [second]


class TestSinks:
    """Tests for the bundled sinks."""

    def test_logging_sink(self, caplog):
        caplog.set_level("INFO")
        LoggingNotificationSink().notify(Notification("struts2", "Struts 2 Setup", CONTENT))
        assert "Struts 2 Setup: Struts 2 Facet has been created, please setup fileset(s)" in caplog.text

    def test_rich_sink_renders_panel(self):
        console = Console(record=True, width=100)
        RichNotificationSink(console).notify(Notification("struts2", "Struts 2 Setup", CONTENT))
        text = console.export_text()
        assert "Struts 2 Setup" in text
        assert "setup fileset(s)" in text
        assert "<a href" not in text

    def test_rich_sink_plain_mode(self):
        console = Console(record=True, width=200, markup=False, color_system=None)
        sink = RichNotificationSink(console, use_rich=False)
        sink.notify(Notification("struts2", "Struts 2 Setup", CONTENT))
        text = console.export_text()
        assert "Struts 2 Setup: Struts 2 Facet has been created, please setup fileset(s)" in text
        assert "[bold underline]" not in text
        assert "\u2502" not in text
