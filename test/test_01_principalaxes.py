###############################################################################
# focalmaker Test Suite
# Test # 01 - Principal axes
# file: /test/test_01_principalaxes.py
#
# Description
#
# Eigen-decomposition of moment tensors into P, B and T axes.
#
###############################################################################

import numpy as np
import pytest
import scipy.linalg

from focalmaker.momenttensor import MomentTensor, strike_dip_rake_to_moment_tensor
from focalmaker.principalaxes import decompose, PrincipalAxes
from focalmaker.exceptions import NumericalDecompositionFailure


def same_line(u, v, tol=1e-9):
    return abs(abs(np.dot(u, v)) - 1.) < tol


@pytest.mark.parametrize("strike,dip,rake,mw", [
    (30., 60., -90., 5.5),
    (0., 90., 0., 0.),
    (211., 12., 45., 7.1),
    (359., 89., -179., 3.),
    (100., 0., 30., 6.),
])
def test_axes_properties(strike, dip, rake, mw):
    mt = strike_dip_rake_to_moment_tensor(strike, dip, rake, mw)
    axes = decompose(mt)

    assert axes.lambda_P <= axes.lambda_B <= axes.lambda_T
    assert axes.eigenvalues.sum() == pytest.approx(mt.trace, abs=1e-6*mt.M0)

    vectors = [axes.P, axes.B, axes.T]
    for v in vectors:
        assert np.linalg.norm(v) == pytest.approx(1., abs=1e-9)
    for i in range(3):
        for j in range(i + 1, 3):
            assert abs(np.dot(vectors[i], vectors[j])) < 1e-6

    # M v = lambda v for every axis
    M = mt.tensor
    for name, value, v in axes:
        np.testing.assert_allclose(M @ v, value*v, atol=1e-9*mt.M0)


def test_double_couple_eigenvalues():
    mt = strike_dip_rake_to_moment_tensor(30., 60., -90., 5.5)
    axes = decompose(mt)
    np.testing.assert_allclose(axes.eigenvalues, [-mt.M0, 0., mt.M0], atol=1e-9*mt.M0)


def test_vertical_strike_slip_axes():
    mt = strike_dip_rake_to_moment_tensor(0., 90., 0., 0.)
    axes = decompose(mt)

    assert same_line(axes.P, np.array([1., 1., 0.])/np.sqrt(2))
    assert same_line(axes.T, np.array([1., -1., 0.])/np.sqrt(2))
    assert same_line(axes.B, np.array([0., 0., 1.]))


def test_ordering_of_diagonal_tensor():
    axes = decompose(MomentTensor(3., 1., 2., 0., 0., 0.))
    np.testing.assert_allclose(axes.eigenvalues, [1., 2., 3.])
    assert same_line(axes.P, [0., 1., 0.])
    assert same_line(axes.B, [0., 0., 1.])
    assert same_line(axes.T, [1., 0., 0.])


def test_repeated_eigenvalues():
    axes = decompose(MomentTensor(2., 2., -4., 0., 0., 0.))
    np.testing.assert_allclose(axes.eigenvalues, [-4., 2., 2.])
    assert same_line(axes.P, [0., 0., 1.])
    np.testing.assert_allclose(axes.eigenvectors.T @ axes.eigenvectors, np.eye(3), atol=1e-12)


def test_non_finite_tensor():
    with pytest.raises(NumericalDecompositionFailure):
        decompose(MomentTensor(np.nan, 0., 0., 0., 0., 0., M0=1.))
    with pytest.raises(NumericalDecompositionFailure):
        decompose(MomentTensor(np.inf, 0., 0., 0., 0., 0., M0=1.))


def test_solver_failure_is_surfaced(monkeypatch):
    def failing_eigh(*args, **kwargs):
        raise np.linalg.LinAlgError("did not converge")

    monkeypatch.setattr(scipy.linalg, "eigh", failing_eigh)
    mt = strike_dip_rake_to_moment_tensor(30., 60., -90., 5.5)
    with pytest.raises(NumericalDecompositionFailure):
        decompose(mt)


def test_tensor_method_and_str():
    mt = strike_dip_rake_to_moment_tensor(30., 60., -90., 5.5)
    axes = mt.principal_axes()
    assert isinstance(axes, PrincipalAxes)
    assert [name for name, _, _ in axes] == ["P", "B", "T"]
    assert "P:" in str(axes)
