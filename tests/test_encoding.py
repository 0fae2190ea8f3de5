"""Tests for transfer functions, RGB standards, matrices and white points."""

import numpy as np
import pytest

import tint_encoding as enc
from tint_matrix import rgb_to_xyz_matrix, xyz_to_rgb_matrix
from tint_transfer import GammaFn, LinearFn, Rec2020Fn, SrgbFn
from tint_whitepoint import D50, D65, WHITE_POINTS


class TestTransferFunctions:
    """Encode/decode curves."""

    @pytest.mark.parametrize("fn", [LinearFn, SrgbFn, GammaFn, Rec2020Fn])
    def test_round_trip(self, fn):
        x = np.linspace(0.0, 1.0, 101)
        np.testing.assert_allclose(fn.from_linear(fn.into_linear(x)), x, atol=1e-6)

    def test_srgb_segments(self):
        assert SrgbFn.into_linear(0.04) == pytest.approx(0.04 / 12.92)
        assert SrgbFn.into_linear(0.5) == pytest.approx(((0.5 + 0.055) / 1.055) ** 2.4)
        assert SrgbFn.from_linear(0.002) == pytest.approx(12.92 * 0.002)

    def test_scalar_in_scalar_out(self):
        assert np.ndim(SrgbFn.into_linear(0.5)) == 0
        assert np.ndim(GammaFn.from_linear(0.5)) == 0

    def test_batch_shape_is_kept(self):
        batch = np.array([[0.1, 0.5, 0.9]])
        assert SrgbFn.into_linear(batch).shape == (1, 3)

    def test_gamma_direction(self):
        assert GammaFn.into_linear(0.25) == pytest.approx(0.25 ** (1 / 2.2))
        assert GammaFn.from_linear(0.25) == pytest.approx(0.25 ** 2.2)

    def test_gamma_of_negative_is_nan(self):
        assert np.isnan(GammaFn.into_linear(-0.5))

    def test_with_gamma(self):
        fn = GammaFn.with_gamma(2.4)
        assert fn.GAMMA == 2.4
        assert GammaFn.with_gamma(2.4) is fn
        assert GammaFn.with_gamma(2.2) is GammaFn
        with pytest.raises(ValueError):
            GammaFn.with_gamma(0.0)

    def test_is_linear(self):
        assert LinearFn.is_linear()
        assert not SrgbFn.is_linear()
        assert not Rec2020Fn.is_linear()


class TestStandards:
    """RGB standard markers."""

    def test_linear_of_standard_is_linear_of_space(self):
        assert enc.Linear[enc.Srgb] is enc.Linear[enc.SrgbSpace]
        assert enc.LinearSrgb is enc.Linear[enc.SrgbSpace]
        assert enc.Linear[enc.SrgbSpace].transfer is LinearFn

    def test_gamma_standard(self):
        assert enc.Gamma[enc.SrgbSpace].transfer is GammaFn
        assert enc.Gamma[enc.SrgbSpace, 2.4].transfer.GAMMA == 2.4
        assert enc.Gamma[enc.SrgbSpace, 2.4] is enc.Gamma[enc.SrgbSpace, 2.4]

    def test_markers_are_not_instantiated(self):
        with pytest.raises(TypeError):
            enc.Srgb()

    def test_bad_parameters(self):
        with pytest.raises(TypeError):
            enc.Linear[D65]
        with pytest.raises(TypeError):
            enc.Gamma[enc.SrgbSpace, 2.2, 1]


class TestMatrices:
    """Primaries -> XYZ matrices."""

    def test_srgb_columns(self):
        m = rgb_to_xyz_matrix(enc.SrgbSpace)
        np.testing.assert_allclose(m[:, 0], [0.4124, 0.2126, 0.0193], atol=1e-4)
        np.testing.assert_allclose(m[:, 1], [0.3576, 0.7152, 0.1192], atol=1e-4)
        np.testing.assert_allclose(m[:, 2], [0.1805, 0.0722, 0.9503], atol=1e-4)

    def test_white_maps_to_white_point(self):
        for space in (enc.SrgbSpace, enc.Rec2020Space):
            m = rgb_to_xyz_matrix(space)
            np.testing.assert_allclose(m @ np.ones(3), D65.XYZ, atol=1e-9)

    def test_inverse(self):
        m = rgb_to_xyz_matrix(enc.Rec2020Space)
        np.testing.assert_allclose(xyz_to_rgb_matrix(enc.Rec2020Space) @ m, np.eye(3), atol=1e-9)

    def test_cached_and_read_only(self):
        m = rgb_to_xyz_matrix(enc.SrgbSpace)
        assert rgb_to_xyz_matrix(enc.SrgbSpace) is m
        assert not m.flags.writeable


class TestWhitePoints:
    """Reference white markers."""

    def test_chromaticity(self):
        np.testing.assert_allclose(D65.chromaticity(), (0.31273, 0.32902), atol=1e-4)

    def test_registry(self):
        assert WHITE_POINTS["D50"] is D50
        assert WHITE_POINTS["D65"] is D65

    def test_markers_are_not_instantiated(self):
        with pytest.raises(TypeError):
            D65()
