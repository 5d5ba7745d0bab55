"""Unit tests for animation curves and schedule strings."""

import numpy as np
import pytest

from motionframe.core.animation import (
    Animation,
    FunctionCurve,
    check_is_number,
    parse_key_frames,
)


class TestCheckIsNumber:
    """Test check_is_number."""

    @pytest.mark.parametrize("value", ["1", "1.5", "-0.25", ".5", "+3"])
    def test_numbers(self, value):
        assert check_is_number(value)

    @pytest.mark.parametrize("value", ["", "sin(t)", "1e3x", "abc"])
    def test_not_numbers(self, value):
        assert not check_is_number(value)


class TestParseKeyFrames:
    """Test parse_key_frames."""

    def test_simple_schedule(self):
        result = parse_key_frames("0:(1.0), 0.5:(2.0), 1:(1.5)")
        assert result == {0.0: "1.0", 0.5: "2.0", 1.0: "1.5"}

    def test_expression_with_commas_and_parentheses(self):
        result = parse_key_frames("0:(0), 1:(max(t, 2) * sin(t))")
        assert result[1.0] == "max(t, 2) * sin(t)"

    def test_quotes_are_removed(self):
        result = parse_key_frames("0:('3')")
        assert result == {0.0: "3"}

    def test_empty_string(self):
        assert parse_key_frames("") == {}

    def test_malformed(self):
        with pytest.raises(RuntimeError, match="not correctly formatted"):
            parse_key_frames("nonsense")


class TestAnimation:
    """Test Animation."""

    def test_linear_interpolation(self):
        anim = Animation([0.0, 1.0], [0, 10])
        assert anim.at(0.25) == pytest.approx(2.5)

    def test_integer_keyframes_interpolate_as_floats(self):
        anim = Animation([0, 1], [0, 1])
        assert anim.values.dtype == np.float64
        assert anim.at(0.5) == pytest.approx(0.5)
        assert isinstance(anim.at(0.5), float)

    def test_values_are_held_outside_domain(self):
        anim = Animation([0.0, 1.0], [2.0, 4.0])
        assert anim.at(-1.0) == 2.0
        assert anim.at(3.0) == 4.0

    def test_multiple_segments(self):
        anim = Animation([0.0, 0.5, 1.0], [0.0, 10.0, 0.0])
        assert anim.at(0.25) == pytest.approx(5.0)
        assert anim.at(0.5) == pytest.approx(10.0)
        assert anim.at(0.75) == pytest.approx(5.0)

    def test_vector_values(self):
        anim = Animation([0.0, 1.0], [(0, 0), (10, 20)])
        np.testing.assert_array_almost_equal(anim.at(0.5), [5.0, 10.0])

    def test_single_easing_applies_to_every_segment(self):
        anim = Animation([0.0, 0.5, 1.0], [0.0, 1.0, 0.0], easings="ease_in_quad")
        assert anim.at(0.25) == pytest.approx(0.25)
        assert anim.at(0.75) == pytest.approx(0.75)

    def test_per_segment_easings(self):
        anim = Animation([0.0, 0.5, 1.0], [0.0, 1.0, 2.0], easings=["linear", "ease_in_quad"])
        assert anim.at(0.25) == pytest.approx(0.5)
        assert anim.at(0.75) == pytest.approx(1.25)

    def test_wrong_easing_count(self):
        with pytest.raises(ValueError, match="needs 1 easings"):
            Animation([0.0, 1.0], [0.0, 1.0], easings=["linear", "linear"])

    def test_domain(self):
        anim = Animation([0.1, 0.9], [0, 1])
        assert anim.domain_start == pytest.approx(0.1)
        assert anim.domain_end == pytest.approx(0.9)

    def test_requires_keyframes(self):
        with pytest.raises(ValueError, match="at least one"):
            Animation([], [])

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError, match="values"):
            Animation([0, 1], [0])

    def test_times_must_increase(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            Animation([0, 0.5, 0.5], [0, 1, 2])

    def test_single_keyframe_is_constant(self):
        anim = Animation([1.0], [3.0])
        assert anim.at(0.0) == 3.0
        assert anim.at(1.0) == 3.0


class TestAnimationFromSchedule:
    """Test Animation.from_schedule."""

    def test_numeric_schedule(self):
        anim = Animation.from_schedule("0:(0), 1:(10)")
        assert anim.at(0.5) == pytest.approx(5.0)

    def test_keyframes_are_sorted(self):
        anim = Animation.from_schedule("1:(10), 0:(0)")
        np.testing.assert_array_equal(anim.times, [0.0, 1.0])

    def test_expression_uses_keyframe_time(self):
        anim = Animation.from_schedule("0:(0), 0.5:(t * 4), 1:(sin(0.0))")
        assert anim.at(0.5) == pytest.approx(2.0)
        assert anim.at(1.0) == pytest.approx(0.0)

    def test_bad_expression(self):
        with pytest.raises(SyntaxError):
            Animation.from_schedule("0:(0), 1:(unknown_var + 1)")


class TestFunctionCurve:
    """Test FunctionCurve."""

    def test_calls_function(self):
        curve = FunctionCurve(lambda t: t ** 2)
        assert curve.at(0.5) == pytest.approx(0.25)
        assert curve.domain_end == 1.0
