from __future__ import annotations

import unittest

from plotframe.markers import PlotMarkers
from plotframe.errors import PlotDataError
from plotframe.style import (
    BLACK,
    Grid,
    PlotBorder,
    PlotLabel,
    PlotLegend,
    PlotTitle,
    TRANSLUCENT_WHITE,
    parse_color,
    validate_style_overrides,
)


class ColorTests(unittest.TestCase):
    def test_hex_colors(self) -> None:
        self.assertEqual(parse_color("#102030"), (16, 32, 48, 255))
        self.assertEqual(parse_color("#10203080"), (16, 32, 48, 128))

    def test_tuple_colors(self) -> None:
        self.assertEqual(parse_color((1, 2, 3)), (1, 2, 3, 255))
        self.assertEqual(parse_color([1, 2, 3, 4]), (1, 2, 3, 4))

    def test_invalid_colors(self) -> None:
        for bad in ("red", "#12345", (1, 2), (0, 0, 256), None):
            with self.assertRaises(ValueError):
                parse_color(bad)


class StyleDefaultsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(PlotTitle().size, 15.0)
        self.assertEqual(PlotLabel().size, 10.0)
        self.assertEqual(PlotLegend().background_color, TRANSLUCENT_WHITE)
        self.assertEqual(PlotLegend().text_size, 10.0)
        self.assertEqual(PlotBorder(), PlotBorder(color=BLACK, thickness=2.0))
        self.assertEqual(Grid().thickness, 0.5)


class StyleOverrideTests(unittest.TestCase):
    def test_overrides_merge_into_defaults(self) -> None:
        legend = validate_style_overrides(PlotLegend(), {"text_size": 14, "border_color": "#ff0000"})
        self.assertEqual(legend.text_size, 14.0)
        self.assertEqual(legend.border_color, (255, 0, 0, 255))
        self.assertEqual(legend.background_color, TRANSLUCENT_WHITE)

    def test_no_overrides_returns_equal_group(self) -> None:
        self.assertEqual(validate_style_overrides(PlotLabel(x_label="x")), PlotLabel(x_label="x"))

    def test_unknown_field_rejected(self) -> None:
        with self.assertRaises(ValueError):
            validate_style_overrides(PlotTitle(), {"font": "Comic Mono"})

    def test_sizes_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            validate_style_overrides(PlotTitle(), {"size": 0})
        with self.assertRaises(ValueError):
            validate_style_overrides(PlotLegend(), {"text_size": True})

    def test_thickness_may_be_zero_but_not_negative(self) -> None:
        self.assertEqual(validate_style_overrides(Grid(), {"thickness": 0}).thickness, 0.0)
        with self.assertRaises(ValueError):
            validate_style_overrides(PlotBorder(), {"thickness": -1})

    def test_text_fields_must_be_strings(self) -> None:
        with self.assertRaises(ValueError):
            validate_style_overrides(PlotLabel(), {"x_label": 3})


class PlotMarkersTests(unittest.TestCase):
    def test_add_keeps_axes_parallel(self) -> None:
        markers = PlotMarkers().add_x(1, "1").add_y(2.5, "2.5").add_y2(3, "c")
        self.assertEqual((markers.x_markers, markers.x_markers_text), ([1.0], ["1"]))
        self.assertEqual((markers.y_markers, markers.y_markers_text), ([2.5], ["2.5"]))
        self.assertEqual((markers.y2_markers, markers.y2_markers_text), ([3.0], ["c"]))
        markers.validate()

    def test_validate_reports_axis(self) -> None:
        markers = PlotMarkers()
        markers.y2_markers_text.append("orphan")
        with self.assertRaisesRegex(PlotDataError, "y2"):
            markers.validate()

    def test_clear(self) -> None:
        markers = PlotMarkers().add_x(1, "1")
        markers.clear()
        self.assertEqual(markers, PlotMarkers())


if __name__ == "__main__":
    unittest.main()
