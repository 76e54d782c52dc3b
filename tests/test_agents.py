"""Unit tests for the image service and the status display."""

import unittest
from unittest.mock import Mock
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint.agents import FakeImageService, ImageService, StatusDisplay
from catpoint.alarm import SecurityService
from catpoint.repository import InMemorySecurityRepository
from catpoint.status import AlarmStatus


class TestFakeImageService(unittest.TestCase):
    """Test cases for FakeImageService."""

    def test_seeded_answers_repeat(self):
        """Two services with the same seed answer alike."""
        first = FakeImageService(seed="7")
        second = FakeImageService(seed=7)
        answers = [first.image_contains_cat(b"img", 50.0) for _ in range(20)]
        self.assertEqual(answers, [second.image_contains_cat(b"img", 50.0) for _ in range(20)])

    def test_threshold_bounds(self):
        """A zero threshold always finds a cat, one above 100 never does."""
        service = FakeImageService(seed="")
        for _ in range(20):
            self.assertTrue(service.image_contains_cat(None, 0.0))
            self.assertFalse(service.image_contains_cat(None, 100.5))

    def test_contract_not_implemented(self):
        """The bare contract cannot classify."""
        with self.assertRaises(NotImplementedError):
            ImageService().image_contains_cat(b"img", 50.0)


class TestStatusDisplay(unittest.TestCase):
    """Test cases for StatusDisplay."""

    def setUp(self):
        """Set up test fixtures."""
        self.repo = InMemorySecurityRepository()
        self.image_service = Mock()
        self.service = SecurityService(self.repo, self.image_service)

    def test_shows_initial_status(self):
        """The display registers itself and shows the current status."""
        display = StatusDisplay(self.service)

        self.assertEqual(display.current_status, "Cool and Good")
        self.assertIn(display, self.service.status_listeners)

    def test_follows_alarm_status(self):
        """Status changes are displayed and logged."""
        display = StatusDisplay(self.service)

        with self.assertLogs('catpoint.agents.display', level='INFO') as logs:
            self.service.set_alarm_status(AlarmStatus.ALARM)

        self.assertEqual(display.current_status, "Awooga!")
        self.assertIn("Awooga!", logs.output[0])

    def test_refreshes_on_sensor_change(self):
        """Sensor changes re-read the alarm status."""
        display = StatusDisplay(self.service)
        self.repo.set_alarm_status(AlarmStatus.PENDING_ALARM)

        self.service.sensors_changed()

        self.assertEqual(display.current_status, "I'm in Danger...")

    def test_tracks_cat(self):
        """Cat detections are remembered."""
        display = StatusDisplay(self.service)
        self.image_service.image_contains_cat.return_value = True

        self.service.process_image(b"img")

        self.assertTrue(display.cat_in_view)


if __name__ == '__main__':
    unittest.main()
