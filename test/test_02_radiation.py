###############################################################################
# focalmaker Test Suite
# Test # 02 - Radiation field
# file: /test/test_02_radiation.py
#
# Description
#
# Radiation amplitude, lower-hemisphere polarity sampling and the amplitude
# lobe surface.
#
###############################################################################

import numpy as np
import pytest

from focalmaker.momenttensor import strike_dip_rake_to_moment_tensor
from focalmaker.radiation import (amplitude, hemisphere_polarity, polarity_arrays, lobe_mesh,
                                  RadiationSample, COMPRESSIONAL, DILATATIONAL)


@pytest.fixture
def mt():
    return strike_dip_rake_to_moment_tensor(30., 60., -90., 5.5)


def random_directions(n=1000, seed=7):
    d = np.random.default_rng(seed).normal(size=(n, 3))
    return d/np.linalg.norm(d, axis=1)[:, np.newaxis]


def test_amplitude_is_quadratic_form(mt):
    d = random_directions()
    expected = np.einsum("ni,ij,nj->n", d, mt.tensor, d)
    np.testing.assert_allclose(amplitude(d, mt), expected, rtol=1e-9, atol=1e-9*mt.M0)


def test_amplitude_is_even(mt):
    d = random_directions()
    np.testing.assert_array_equal(amplitude(-d, mt), amplitude(d, mt))
    for v in d[:50]:
        assert amplitude(-v, mt) == amplitude(v, mt)


def test_amplitude_scalar(mt):
    u = amplitude([0., 0., 1.], mt)
    assert isinstance(u, float)
    assert u == mt.Mpp


def test_polarity_threshold():
    assert RadiationSample(np.array([0., 0., -1.]), 0.).polarity == COMPRESSIONAL
    assert RadiationSample(np.array([0., 0., -1.]), 1e-30).polarity == COMPRESSIONAL
    assert RadiationSample(np.array([0., 0., -1.]), -1e-30).polarity == DILATATIONAL


def test_hemisphere_samples(mt):
    samples = hemisphere_polarity(mt, 2000, rng=3)
    assert len(samples) == 2000
    for s in samples:
        assert s.direction[2] <= 0.
        assert np.linalg.norm(s.direction) == pytest.approx(1., abs=1e-12)
        assert s.amplitude == pytest.approx(amplitude(s.direction, mt), rel=1e-12, abs=1e-12*mt.M0)
        assert s.polarity == (COMPRESSIONAL if s.amplitude >= 0 else DILATATIONAL)


def test_hemisphere_reproducible(mt):
    d1, u1 = polarity_arrays(mt, 500, rng=42)
    d2, u2 = polarity_arrays(mt, 500, rng=np.random.default_rng(42))
    np.testing.assert_array_equal(d1, d2)
    np.testing.assert_array_equal(u1, u2)

    d3, _ = polarity_arrays(mt, 500, rng=43)
    assert not np.array_equal(d1, d3)


def test_hemisphere_cosine_weighting(mt):
    # cos(theta) = u1 is uniform, so |z| is uniform in [0, 1]
    d, _ = polarity_arrays(mt, 20000, rng=0)
    assert np.mean(-d[:, 2]) == pytest.approx(0.5, abs=0.02)
    assert np.mean(d[:, 2]**2) == pytest.approx(1./3, abs=0.02)


def test_hemisphere_both_polarities(mt):
    samples = hemisphere_polarity(mt, 2000, rng=11)
    kinds = {s.polarity for s in samples}
    assert kinds == {COMPRESSIONAL, DILATATIONAL}


def test_lobe_mesh(mt):
    scale = 1.5
    mesh = lobe_mesh(mt, scale, lat_steps=10, lon_steps=20)

    assert mesh.shape == (11, 21)
    assert mesh.vertices.shape == (11*21, 3)
    np.testing.assert_allclose(np.linalg.norm(mesh.directions, axis=1), 1., atol=1e-12)
    np.testing.assert_allclose(mesh.radii, 1 + scale*np.abs(amplitude(mesh.directions, mt)))
    np.testing.assert_allclose(np.linalg.norm(mesh.vertices, axis=1), mesh.radii, rtol=1e-12)

    # poles and seam
    grid = mesh.directions.reshape(11, 21, 3)
    np.testing.assert_allclose(grid[0, :, 2], 1.)
    np.testing.assert_allclose(grid[-1, :, 2], -1.)
    np.testing.assert_allclose(grid[:, 0], grid[:, -1], atol=1e-12)


def test_lobe_mesh_zero_scale_is_unit_sphere(mt):
    mesh = lobe_mesh(mt, 0., lat_steps=8, lon_steps=16)
    np.testing.assert_array_equal(mesh.radii, 1.)


def test_lobe_faces(mt):
    mesh = lobe_mesh(mt, lat_steps=4, lon_steps=6)
    faces = mesh.faces
    assert faces.shape == (2*4*6, 3)
    assert faces.min() == 0
    assert faces.max() == 5*7 - 1
