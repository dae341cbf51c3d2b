import numpy as np
import pytest

from bemstokes.free_surface_kernel import FreeSurfaceStokesKernel
from bemstokes.kernel import StokesKernel

TOL = 1e-6


def _g_comparison_vectors(i):
    position = 1.0
    source = np.zeros(3)
    valuation_point = np.zeros(3)
    valuation_point[i] = position
    valuation_point[(i + 1) % 3] = 3.0
    val_image = valuation_point.copy()
    source_image = source.copy()
    source_image[i] -= 2 * (source[i] - position)
    val_image[i] -= 2 * (valuation_point[i] - position)
    r = valuation_point - source
    r_image = val_image - source
    r_image_old = valuation_point - source_image
    return r, r_image, r_image_old


def _w_comparison_vectors(i):
    position = 1.0
    source = np.zeros(3)
    valuation_point = np.zeros(3)
    valuation_point[i] = position + 3.0
    valuation_point[(i + 1) % 3] = 3.0
    val_image = valuation_point.copy()
    source_image = source.copy()
    val_image[i] -= 2 * (valuation_point[i] - position)
    source_image[i] -= 2 * (source[i] - position)
    r = valuation_point - source
    r_image = val_image - source
    r_image_old = valuation_point - source_image
    return r, r_image, r_image_old


@pytest.mark.parametrize("i", [0, 1, 2])
def test_g_comparison_new_and_old(i):
    kernel = FreeSurfaceStokesKernel()
    kernel.wall_orientation = i
    r, r_image, r_image_old = _g_comparison_vectors(i)
    g = kernel.value_tens_image(r, r_image)
    g_old = kernel.value_tens_image_old(r, r_image_old)
    assert g.shape == (3, 3)
    assert np.all(np.abs(g - g_old) < TOL)


@pytest.mark.parametrize("i", [0, 1, 2])
def test_w_comparison_new_and_old(i):
    kernel = FreeSurfaceStokesKernel()
    kernel.wall_orientation = i
    r, r_image, r_image_old = _w_comparison_vectors(i)
    w = kernel.value_tens_image2(r, r_image)
    w_old = kernel.value_tens_image2_old(r, r_image_old)
    assert w.shape == (3, 3, 3)
    assert np.all(np.abs(w - w_old) < TOL)


@pytest.mark.parametrize("i", [0, 1, 2])
def test_wall_row_vanishes_on_wall(i):
    kernel = FreeSurfaceStokesKernel(wall_orientation=i)
    p = np.array([0.4, -1.2, 2.0])
    g = kernel.value_tens_image(p, p)
    np.testing.assert_allclose(g[i], np.zeros(3), atol=1e-14)
    other = [k for k in range(3) if k != i]
    free = StokesKernel().value_tens(p)
    np.testing.assert_allclose(g[other], 2 * free[other], rtol=1e-12)


def test_image_combines_free_space_kernels():
    kernel = FreeSurfaceStokesKernel(wall_orientation=2)
    base = StokesKernel()
    p = np.array([1.0, 2.0, 0.5])
    p_image = np.array([1.0, 2.0, -3.5])
    g = kernel.value_tens_image(p, p_image)
    expected_plus = base.value_tens(p) + base.value_tens(p_image)
    expected_minus = base.value_tens(p) - base.value_tens(p_image)
    np.testing.assert_allclose(g[:2], expected_plus[:2], rtol=1e-12)
    np.testing.assert_allclose(g[2], expected_minus[2], rtol=1e-12)


def test_image2_combines_free_space_stresslets():
    kernel = FreeSurfaceStokesKernel(wall_orientation=1)
    base = StokesKernel()
    p = np.array([1.0, 2.0, 0.5])
    p_image = np.array([1.0, -4.0, 0.5])
    w = kernel.value_tens_image2(p, p_image)
    plus = base.value_tens2(p) + base.value_tens2(p_image)
    minus = base.value_tens2(p) - base.value_tens2(p_image)
    np.testing.assert_allclose(w[1], minus[1], rtol=1e-12)
    np.testing.assert_allclose(w[0], plus[0], rtol=1e-12)
    np.testing.assert_allclose(w[2], plus[2], rtol=1e-12)


def test_pimponi_g_matches_old():
    kernel = FreeSurfaceStokesKernel(epsilon=0.01, wall_orientation=0)
    p = np.array([0.3, -0.7, 1.1])
    p_image = np.array([-2.3, -0.7, 1.1])
    np.testing.assert_allclose(
        kernel.value_tens_image_pimponi(p, p_image),
        kernel.value_tens_image_old(p, p_image),
        rtol=1e-14,
    )


def test_pimponi_w_signs_second_index():
    kernel = FreeSurfaceStokesKernel(wall_orientation=0)
    base = StokesKernel()
    p = np.array([0.3, -0.7, 1.1])
    p_image = np.array([-2.3, -0.7, 1.1])
    w = kernel.value_tens_image2_pimponi(p, p_image)
    minus = base.value_tens2(p) - base.value_tens2(p_image)
    plus = base.value_tens2(p) + base.value_tens2(p_image)
    np.testing.assert_allclose(w[:, 0, :], minus[:, 0, :], rtol=1e-12)
    np.testing.assert_allclose(w[:, 1:, :], plus[:, 1:, :], rtol=1e-12)


def test_image_kernel_is_symmetric_when_old_form_on_wall():
    kernel = FreeSurfaceStokesKernel(wall_orientation=1)
    p = np.array([0.5, 0.0, 2.0])
    g = kernel.value_tens_image_old(p, p)
    np.testing.assert_allclose(g[:, 1], np.zeros(3), atol=1e-14)


def test_epsilon_changes_value():
    p = np.array([1.0, 2.0, 2.0])
    plain = FreeSurfaceStokesKernel(wall_orientation=0).value_tens_image(p, p)
    regular = FreeSurfaceStokesKernel(epsilon=1.0, wall_orientation=0).value_tens_image(p, p)
    # R = 3 without epsilon and 4 with it; diagonal entry (1,1) doubles g/(8 pi).
    assert plain[1, 1] == pytest.approx(2 * (4.0 / 27.0 + 1.0 / 3.0) / (8 * np.pi))
    assert regular[1, 1] == pytest.approx(2 * (4.0 / 64.0 + 1.0 / 4.0) / (8 * np.pi))


def test_two_dimensions_rejected():
    kernel = FreeSurfaceStokesKernel()
    with pytest.raises(ValueError):
        kernel.value_tens_image([1.0, 0.0], [1.0, 0.0])
    with pytest.raises(ValueError):
        kernel.value_tens_image2_old([1.0, 0.0], [1.0, 0.0])


def test_mismatched_shapes_rejected():
    kernel = FreeSurfaceStokesKernel()
    with pytest.raises(ValueError):
        kernel.value_tens_image2([1.0, 0.0, 0.0], [1.0, 0.0])


def test_negative_orientation_rejected():
    with pytest.raises(ValueError):
        FreeSurfaceStokesKernel(wall_orientation=-1)


def test_orientation_round_trip():
    kernel = FreeSurfaceStokesKernel()
    kernel.wall_orientation = 2
    assert kernel.wall_orientation == 2