"""Tests for component types and conversions between them."""

import numpy as np
import pytest

from tint_component import (
    check_component,
    convert_components,
    from_component,
    is_float_component,
    max_intensity,
    zero,
)


class TestComponentTypes:
    """Validation of component types."""

    def test_float_builtin_maps_to_float64(self):
        assert check_component(float) is np.float64

    def test_dtype_is_normalized(self):
        assert check_component(np.dtype("uint16")) is np.uint16

    @pytest.mark.parametrize("bad", [np.int8, np.int32, np.bool_, np.complex128, object, "foo"])
    def test_rejected(self, bad):
        with pytest.raises(TypeError):
            check_component(bad)

    def test_is_float(self):
        assert is_float_component(np.float32)
        assert not is_float_component(np.uint8)

    def test_endpoints(self):
        assert zero(np.uint8) == 0
        assert type(zero(np.uint8)) is np.uint8
        assert max_intensity(np.uint8) == 255
        assert max_intensity(np.uint16) == 65535
        assert max_intensity(np.uint64) == 2**64 - 1
        assert max_intensity(np.float32) == 1.0
        assert type(max_intensity(np.float32)) is np.float32


class TestFromComponent:
    """Single channel conversions."""

    @pytest.mark.parametrize("component, value", [
        (np.float32, 0.25),
        (np.float64, 0.7),
        (np.uint8, 17),
        (np.uint16, 4000),
    ])
    def test_identity(self, component, value):
        assert from_component(value, component, component) == component(value)

    def test_float_to_uint8(self):
        assert from_component(1.0, np.float32, np.uint8) == 255
        assert from_component(0.0, np.float32, np.uint8) == 0
        assert from_component(0.5, np.float64, np.uint8) == 128

    def test_float_to_uint_saturates(self):
        assert from_component(2.0, np.float64, np.uint8) == 255
        assert from_component(-1.0, np.float64, np.uint8) == 0
        assert from_component(float("nan"), np.float64, np.uint8) == 0

    def test_uint_to_float(self):
        assert from_component(255, np.uint8, np.float32) == 1.0
        assert from_component(51, np.uint8, np.float64) == pytest.approx(0.2)

    def test_uint_widening_and_narrowing(self):
        assert from_component(255, np.uint8, np.uint16) == 65535
        assert from_component(1, np.uint8, np.uint16) == 257
        assert from_component(65535, np.uint16, np.uint8) == 255
        assert from_component(257, np.uint16, np.uint8) == 1

    def test_uint64_endpoints_are_exact(self):
        top = 2**64 - 1
        assert from_component(top, np.uint64, np.uint8) == 255
        assert from_component(255, np.uint8, np.uint64) == top
        assert from_component(1.0, np.float64, np.uint64) == top


class TestConvertComponents:
    """Vectorized conversions agree with the scalar ones."""

    def test_uint8_to_float(self):
        out = convert_components(np.array([0, 128, 255], dtype=np.uint8), np.uint8, np.float64)
        np.testing.assert_allclose(out, [0.0, 128 / 255, 1.0])

    def test_float_to_uint8(self):
        out = convert_components([0.0, 0.5, 1.0], np.float64, np.uint8)
        assert out.dtype == np.uint8
        np.testing.assert_array_equal(out, [0, 128, 255])

    def test_uint8_to_uint16(self):
        out = convert_components(np.array([0, 1, 255], dtype=np.uint8), np.uint8, np.uint16)
        np.testing.assert_array_equal(out, [0, 257, 65535])

    def test_float_to_uint64(self):
        out = convert_components([0.0, 1.0], np.float64, np.uint64)
        assert out.dtype == np.uint64
        assert int(out[1]) == 2**64 - 1

    @pytest.mark.parametrize("src, dst", [
        (np.uint8, np.uint16),
        (np.uint16, np.uint8),
        (np.uint8, np.float32),
        (np.float64, np.uint16),
    ])
    def test_matches_scalar(self, src, dst):
        if is_float_component(src):
            values = np.array([0.0, 0.1, 0.5, 0.9, 1.0], dtype=src)
        else:
            values = np.array([0, 3, 100, int(max_intensity(src))], dtype=src)
        out = convert_components(values, src, dst)
        expected = [from_component(v, src, dst) for v in values]
        np.testing.assert_allclose(out.astype(np.float64), np.array(expected, dtype=np.float64))
