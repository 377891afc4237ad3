import math
import os
import unittest
import doctest

# Kivy parses sys.argv on import unless told otherwise; the test runner's arguments are not Kivy's.
os.environ.setdefault('KIVY_NO_ARGS', '1')
os.environ.setdefault('KIVY_NO_CONSOLELOG', '1')

from kivy.metrics import dp

import utils

from chart_viewport import layout_constants
from chart_viewport import utils as chart_viewport_utils
from chart_viewport.calculator import ViewportCalculator
from chart_viewport.structure import DataBoundaries, PixelRect, Viewport


def load_tests(loader, tests, ignore):
    # Test the docstrings inside our actual codebase
    tests.addTests(doctest.DocTestSuite(utils))
    tests.addTests(doctest.DocTestSuite(chart_viewport_utils))

    # Some tests in the doctests style are too large to nicely fit into a docstring; better to keep them separate:
    tests.addTests(doctest.DocFileSuite("doctests/chart_viewport_construct.txt"))

    return tests


class FixedBoundaries(object):
    def __init__(self, boundaries):
        self.boundaries = boundaries

    def get_boundaries(self):
        return self.boundaries


def calculator_for(boundaries, width=100, height=200, margin=0):
    calculator = ViewportCalculator(FixedBoundaries(boundaries), margin=margin)
    calculator.recompute_content_area(width, height, 0, 0, 0, 0)
    calculator.recompute_viewport()
    return calculator


class ViewportCalculatorTestCase(unittest.TestCase):

    def test_boundary_exactness(self):
        c = calculator_for(DataBoundaries(0.0, 20.0, 10.0, 0.0))

        self.assertEqual(PixelRect(0, 0, 100, 200), c.content_rect)
        self.assertEqual(Viewport(0.0, 0.0, 10.0, 20.0), c.current_viewport)
        self.assertEqual(50, c.to_pixel_x(5))
        self.assertEqual(100, c.to_pixel_y(10))
        self.assertEqual((50, 100), c.to_pixel(5, 10))

    def test_out_of_bounds_hit_test(self):
        c = calculator_for(DataBoundaries(0.0, 20.0, 10.0, 0.0))

        self.assertIsNone(c.to_data_point(-1, 50))
        self.assertIsNone(c.to_data_point(50, 201))
        self.assertEqual((0.0, 20.0), c.to_data_point(0, 0))
        self.assertEqual((10.0, 0.0), c.to_data_point(100, 200))

    def test_contains_pixel_is_inclusive(self):
        c = calculator_for(DataBoundaries(0.0, 20.0, 10.0, 0.0), margin=4)

        self.assertEqual(PixelRect(4, 4, 96, 196), c.content_rect)
        self.assertTrue(c.contains_pixel(4, 4))
        self.assertTrue(c.contains_pixel(96, 196))
        self.assertFalse(c.contains_pixel(3, 100))
        self.assertFalse(c.contains_pixel(50, 197))

    def test_round_trip(self):
        c = calculator_for(DataBoundaries(-3.5, 17.25, 12.0, -8.0), width=640, height=480, margin=4)
        c.set_current_viewport(Viewport(-1.0, -5.0, 7.5, 11.0))

        viewport = c.current_viewport
        for i in range(1, 10):
            for j in range(1, 10):
                data_x = viewport.left + viewport.width() * i / 10
                data_y = viewport.top + viewport.height() * j / 10

                result = c.to_data_point(c.to_pixel_x(data_x), c.to_pixel_y(data_y))

                self.assertIsNotNone(result)
                self.assertAlmostEqual(data_x, result[0])
                self.assertAlmostEqual(data_y, result[1])

    def test_higher_values_are_drawn_higher(self):
        c = calculator_for(DataBoundaries(0.0, 20.0, 10.0, 0.0))
        self.assertLess(c.to_pixel_y(15), c.to_pixel_y(5))

    def test_clamp_keeps_viewport_within_maximum(self):
        c = calculator_for(DataBoundaries(0.0, 20.0, 10.0, 0.0))

        for viewport in [
                Viewport(-5.0, -5.0, 15.0, 25.0),
                Viewport(-5.0, 2.0, 5.0, 25.0),
                Viewport(3.0, -1.0, 12.0, 4.0),
                Viewport(1.0, 1.0, 2.0, 2.0)]:

            c.set_current_viewport(viewport)
            c.clamp_viewport()

            clamped = c.current_viewport
            maximum = c.maximum_viewport
            self.assertGreaterEqual(clamped.left, maximum.left)
            self.assertLessEqual(clamped.right, maximum.right)
            self.assertGreaterEqual(clamped.top, maximum.top)
            self.assertLessEqual(clamped.bottom, maximum.bottom)

    def test_clamp_never_collapses_the_viewport(self):
        c = calculator_for(DataBoundaries(0.0, 20.0, 10.0, 0.0))

        for viewport in [
                Viewport(5.0, 5.0, 5.0, 5.0),
                Viewport(15.0, 25.0, 18.0, 30.0),
                Viewport(4.0, 8.0, 2.0, 3.0)]:

            c.set_current_viewport(viewport)
            c.clamp_viewport()
            self.assertGreater(c.current_viewport.width(), 0)
            self.assertGreater(c.current_viewport.height(), 0)

            c.set_viewport_origin(3.0, 3.0)
            self.assertGreater(c.current_viewport.width(), 0)
            self.assertGreater(c.current_viewport.height(), 0)

    def test_pan_preserves_size(self):
        c = calculator_for(DataBoundaries(0.0, 20.0, 10.0, 0.0))
        c.set_current_viewport(Viewport(2.0, 4.0, 4.5, 8.25))

        for x, y in [(0.0, 20.0), (3.0, 10.0), (-100.0, -100.0), (100.0, 100.0), (7.5, 4.25)]:
            c.set_viewport_origin(x, y)
            self.assertEqual(2.5, c.current_viewport.width())
            self.assertEqual(4.25, c.current_viewport.height())

    def test_pan_puts_bottom_left_corner_at_origin(self):
        c = calculator_for(DataBoundaries(0.0, 20.0, 10.0, 0.0))
        c.set_current_viewport(Viewport(0.0, 0.0, 2.0, 4.0))

        c.set_viewport_origin(3.0, 10.0)
        self.assertEqual(Viewport(3.0, 6.0, 5.0, 10.0), c.current_viewport)

        # bounded by the maximum viewport
        c.set_viewport_origin(9.0, 1.0)
        self.assertEqual(Viewport(8.0, 0.0, 10.0, 4.0), c.current_viewport)

    def test_recompute_viewport_swaps_top_and_bottom(self):
        c = calculator_for(DataBoundaries(-1.0, 30.0, 1.0, 10.0))

        self.assertEqual(Viewport(-1.0, 10.0, 1.0, 30.0), c.maximum_viewport)
        self.assertEqual(10.0, c.maximum_viewport.y_min)
        self.assertEqual(30.0, c.maximum_viewport.y_max)

    def test_recompute_viewport_resets_zoom(self):
        provider = FixedBoundaries(DataBoundaries(0.0, 20.0, 10.0, 0.0))
        c = ViewportCalculator(provider, margin=0)
        c.recompute_content_area(100, 200, 0, 0, 0, 0)
        c.recompute_viewport()
        c.set_current_viewport(Viewport(1.0, 1.0, 2.0, 2.0))

        provider.boundaries = DataBoundaries(0.0, 40.0, 10.0, 0.0)
        c.recompute_viewport()

        self.assertEqual(Viewport(0.0, 0.0, 10.0, 40.0), c.current_viewport)
        self.assertEqual(c.maximum_viewport, c.current_viewport)

    def test_single_point_data_set_yields_non_finite_pixels(self):
        c = calculator_for(DataBoundaries(5.0, 3.0, 5.0, 3.0))

        self.assertEqual(0, c.current_viewport.width())
        self.assertTrue(math.isnan(c.to_pixel_x(5.0)))
        self.assertEqual(math.inf, c.to_pixel_x(6.0))
        self.assertEqual(-math.inf, c.to_pixel_x(4.0))
        self.assertTrue(math.isnan(c.to_pixel_y(3.0)))
        self.assertEqual(-math.inf, c.to_pixel_y(4.0))
        self.assertEqual((0, 0), c.scroll_surface_size())

    def test_hit_test_before_sizing_yields_non_finite_data_point(self):
        c = ViewportCalculator(FixedBoundaries(DataBoundaries(0.0, 20.0, 10.0, 0.0)), margin=0)
        c.recompute_viewport()

        data_x, data_y = c.to_data_point(0, 0)
        self.assertTrue(math.isnan(data_x))
        self.assertTrue(math.isnan(data_y))

    def test_pan_of_a_minimal_viewport_can_collapse_it(self):
        c = calculator_for(DataBoundaries(0.0, 1e6, 1e6, 0.0))
        c.set_current_viewport(Viewport(0.0, 0.0, 0.0, 0.0))
        c.clamp_viewport()
        self.assertGreater(c.current_viewport.width(), 0)

        c.set_viewport_origin(5e5, 5e5)
        self.assertEqual(0.0, c.current_viewport.width())

    def test_scroll_surface_size(self):
        c = calculator_for(DataBoundaries(0.0, 20.0, 10.0, 0.0))
        self.assertEqual((100, 200), c.scroll_surface_size())

        c.set_current_viewport(Viewport(0.0, 0.0, 5.0, 5.0))
        self.assertEqual((200, 800), c.scroll_surface_size())


class MarginsTestCase(unittest.TestCase):

    def setUp(self):
        self.c = ViewportCalculator(FixedBoundaries(DataBoundaries(0.0, 1.0, 1.0, 0.0)), margin=0)

    def test_uniform_margin(self):
        self.c.recompute_content_area(100, 100, 0, 0, 0, 0)
        self.c.set_uniform_margin(10)

        self.assertEqual(PixelRect(10, 10, 90, 90), self.c.content_rect)
        self.assertEqual(PixelRect(0, 0, 100, 100), self.c.content_rect_with_margins)

    def test_margins_per_side_are_not_cumulative(self):
        self.c.recompute_content_area(100, 100, 5, 5, 5, 5)
        self.c.set_margins(1, 2, 3, 4)
        self.c.set_margins(1, 2, 3, 4)

        self.assertEqual(PixelRect(6, 7, 92, 91), self.c.content_rect)

    def test_axis_margins_are_cumulative(self):
        self.c.recompute_content_area(100, 100, 0, 0, 0, 0)
        self.c.set_axis_margins(10, 20)
        self.assertEqual(PixelRect(20, 0, 100, 90), self.c.content_rect_with_margins)
        self.assertEqual(PixelRect(20, 0, 100, 90), self.c.content_rect)

        self.c.set_axis_margins(10, 20)
        self.assertEqual(PixelRect(40, 0, 100, 80), self.c.content_rect_with_margins)

    def test_recompute_content_area_discards_axis_margins(self):
        c = ViewportCalculator(FixedBoundaries(DataBoundaries(0.0, 1.0, 1.0, 0.0)), margin=4)
        c.recompute_content_area(100, 100, 0, 0, 0, 0)
        c.set_axis_margins(10, 20)
        c.recompute_content_area(100, 100, 0, 0, 0, 0)

        self.assertEqual(PixelRect(0, 0, 100, 100), c.content_rect_with_margins)
        self.assertEqual(PixelRect(4, 4, 96, 96), c.content_rect)

    def test_margins_are_checked_for_type(self):
        with self.assertRaises(AssertionError):
            self.c.set_uniform_margin(1.5)

    def test_content_area_takes_whole_pixels(self):
        # Kivy sizes are floats
        with self.assertRaises(AssertionError):
            self.c.recompute_content_area(100.0, 100.0, 0, 0, 0, 0)

        self.c.recompute_content_area(int(100.0), int(100.0), 0, 0, 0, 0)
        self.assertEqual(PixelRect(0, 0, 100, 100), self.c.content_rect)


class LayoutConstantsTestCase(unittest.TestCase):

    def tearDown(self):
        layout_constants.set_common_margin_dp(layout_constants.DEFAULT_COMMON_MARGIN_DP)

    def test_default_margin_is_converted_from_dp(self):
        c = ViewportCalculator(FixedBoundaries(DataBoundaries(0.0, 1.0, 1.0, 0.0)))

        self.assertEqual(int(dp(layout_constants.DEFAULT_COMMON_MARGIN_DP) + 0.5), c.margin)
        self.assertIsInstance(c.margin, int)

    def test_configured_margin(self):
        layout_constants.set_common_margin_dp(0)
        self.assertEqual(0, layout_constants.get_common_margin_dp())
        self.assertEqual(0, ViewportCalculator(FixedBoundaries(DataBoundaries(0.0, 1.0, 1.0, 0.0))).margin)


if __name__ == '__main__':
    unittest.main()
