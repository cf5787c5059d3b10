"""Tests for acadtrack.client.notifications.Notifier with a controllable clock."""

import unittest

from acadtrack.client.api import ApiFailure, ApiSuccess
from acadtrack.client.notifications import Notifier


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class TestNotifier(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.notifier = Notifier(clock=self.clock)

    def test_notice_expires_after_duration(self) -> None:
        self.notifier.success("Saved", duration=3.0)
        self.assertEqual([n.message for n in self.notifier.active()], ["Saved"])
        self.clock.now += 3.0
        self.assertEqual(self.notifier.active(), [])

    def test_zero_duration_is_persistent(self) -> None:
        nid = self.notifier.warning("Offline", duration=0)
        self.clock.now += 10_000
        self.assertEqual([n.id for n in self.notifier.active()], [nid])
        self.notifier.remove(nid)
        self.assertEqual(self.notifier.active(), [])

    def test_kinds_and_order(self) -> None:
        self.notifier.info("one")
        self.notifier.error("two")
        kinds = [n.kind for n in self.notifier.active()]
        self.assertEqual(kinds, ["info", "error"])

    def test_unknown_kind_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.notifier.show("x", kind="fatal")  # type: ignore[arg-type]

    def test_notify_result(self) -> None:
        self.notifier.notify_result(ApiFailure(error="Admin access required", status=403))
        self.notifier.notify_result(ApiSuccess(data=None, status=200), success_message="Done")
        self.notifier.notify_result(ApiSuccess(data=None, status=200))
        notices = [(n.kind, n.message) for n in self.notifier.active()]
        self.assertEqual(notices, [("error", "Admin access required"), ("success", "Done")])
