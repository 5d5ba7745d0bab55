"""Unit tests for easing functions."""

import pytest

from motionframe.utils.easing import EASINGS, get_easing, linear


class TestEasings:
    """Test every registered easing."""

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_endpoints(self, name):
        fn = EASINGS[name]
        assert fn(0.0) == pytest.approx(0.0)
        assert fn(1.0) == pytest.approx(1.0)

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_input_is_clamped(self, name):
        fn = EASINGS[name]
        assert fn(-1.0) == pytest.approx(0.0)
        assert fn(2.0) == pytest.approx(1.0)

    def test_ease_in_out_cubic_midpoint(self):
        assert EASINGS["ease_in_out_cubic"](0.5) == pytest.approx(0.5)


class TestGetEasing:
    """Test get_easing."""

    def test_none_is_linear(self):
        assert get_easing(None) is linear

    def test_callable_passes_through(self):
        fn = lambda t: t  # noqa: E731
        assert get_easing(fn) is fn

    def test_by_name(self):
        assert get_easing("smooth_step") is EASINGS["smooth_step"]

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown easing"):
            get_easing("wobble")
