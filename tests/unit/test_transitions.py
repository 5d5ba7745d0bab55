"""Unit tests for transition resolution."""

import numpy as np
import pytest

from motionframe.core.elements import Object
from motionframe.core.transitions import (
    Rotation,
    Scaling,
    Translation,
    get_position,
    get_scale,
    resolve_transition,
)


class TestTargets:
    """Test get_position and get_scale."""

    def test_position_from_coordinates(self):
        np.testing.assert_array_equal(get_position((3, 4)), [3.0, 4.0])

    def test_position_from_object_is_late_bound(self):
        obj = Object((1, 10), start_pos=(1, 1))
        transition = Translation((0, 0), obj)
        obj.current_setting.position = np.array([5.0, 6.0])
        np.testing.assert_array_equal(resolve_transition(1.0, transition), [5.0, 6.0])

    def test_position_from_callable(self):
        np.testing.assert_array_equal(get_position(lambda: (7, 8)), [7.0, 8.0])

    def test_scalar_scale_is_uniform(self):
        np.testing.assert_array_equal(get_scale(2), [2.0, 2.0])

    def test_scale_pair(self):
        np.testing.assert_array_equal(get_scale((2, 3)), [2.0, 3.0])

    def test_scale_from_object(self):
        obj = Object((1, 10))
        np.testing.assert_array_equal(get_scale(obj), [1.0, 1.0])


class TestResolveTransition:
    """Test resolve_transition for every transition."""

    def test_none_passes_value_through(self):
        value = object()
        assert resolve_transition(value, None) is value

    def test_rotation_passes_value_through(self):
        assert resolve_transition(1.25, Rotation()) == 1.25

    def test_translation_at_zero_is_zero_vector(self):
        result = resolve_transition(0.0, Translation((3, 4), (10, 20)))
        np.testing.assert_array_equal(result, [0.0, 0.0])

    def test_translation_at_one_is_full_delta(self):
        result = resolve_transition(1.0, Translation((3, 4), (10, 20)))
        np.testing.assert_array_almost_equal(result, [7.0, 16.0])

    def test_translation_is_a_delta_not_a_position(self):
        result = resolve_transition(0.5, Translation((100, 100), (110, 120)))
        np.testing.assert_array_almost_equal(result, [5.0, 10.0])

    def test_translation_ignores_value_shape(self):
        result = resolve_transition(np.array([0.5, 1.0]), Translation((0, 0), (10, 10)))
        np.testing.assert_array_almost_equal(result, [5.0, 10.0])

    def test_scaling_at_zero_is_from(self):
        result = resolve_transition(0.0, Scaling((1, 2), (3, 6)))
        np.testing.assert_array_almost_equal(result, [1.0, 2.0])

    def test_scaling_at_one_is_to(self):
        result = resolve_transition(1.0, Scaling((1, 2), (3, 6)))
        np.testing.assert_array_almost_equal(result, [3.0, 6.0])

    def test_scaling_is_absolute(self):
        result = resolve_transition(0.5, Scaling(2, 4))
        np.testing.assert_array_almost_equal(result, [3.0, 3.0])

    def test_unknown_transition(self):
        with pytest.raises(TypeError, match="Unknown transition"):
            resolve_transition(0.5, "fade")
