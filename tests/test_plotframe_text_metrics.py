from __future__ import annotations

import unittest
from unittest import mock

from plotframe.text_metrics import FontTextMetrics, _resolve_font_path


class FontTextMetricsTests(unittest.TestCase):
    def test_empty_text_has_zero_width(self) -> None:
        self.assertEqual(FontTextMetrics().measure_width("", 12.0), 0.0)

    def test_longer_text_is_wider(self) -> None:
        metrics = FontTextMetrics()
        self.assertGreater(metrics.measure_width("abcdef", 14.0), metrics.measure_width("abc", 14.0))

    def test_larger_size_is_wider(self) -> None:
        metrics = FontTextMetrics()
        self.assertGreater(metrics.measure_width("WWWW", 28.0), metrics.measure_width("WWWW", 12.0))

    def test_unknown_family_falls_back_to_default_font(self) -> None:
        with mock.patch("plotframe.text_metrics._resolve_font_path", return_value=None):
            metrics = FontTextMetrics(font_family="No Such Font Family 123")
            self.assertGreater(metrics.measure_width("legend", 16.0), 0.0)

    def test_font_resolution_without_font_dirs(self) -> None:
        _resolve_font_path.cache_clear()
        try:
            with mock.patch("plotframe.text_metrics.FONT_DIRS", ()):
                self.assertIsNone(_resolve_font_path("Anything"))
        finally:
            _resolve_font_path.cache_clear()


if __name__ == "__main__":
    unittest.main()
