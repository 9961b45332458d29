import numpy as np
from focalmaker.momenttensor import MomentTensor


COMPRESSIONAL = "compressional"
DILATATIONAL = "dilatational"


def amplitude(direction, tensor):
    """Far-field radiation amplitude ``u = d^T M d`` along ``direction``.

    :param direction: A unit vector ``(x, y, z)`` or an array of them.
    :type direction: numpy array (shape (3,) or (N,3))
    :param tensor: The source moment tensor.
    :type tensor: :class:`MomentTensor`

    :returns: Scalar amplitude, or one per direction.

    The form is even, ``amplitude(-d, M) == amplitude(d, M)`` holds exactly.
    """
    d = np.asarray(direction, dtype=np.double)
    x = d[..., 0]
    y = d[..., 1]
    z = d[..., 2]

    u = tensor.Mrr*x*x + \
        tensor.Mtt*y*y + \
        tensor.Mpp*z*z + \
        2*tensor.Mrt*x*y + \
        2*tensor.Mrp*x*z + \
        2*tensor.Mtp*y*z

    if u.ndim == 0:
        return float(u)
    return u


def polarity(u):
    return COMPRESSIONAL if u >= 0 else DILATATIONAL


class RadiationSample:
    """A direction on the focal sphere and the radiation amplitude there.

    :param direction: Unit vector.
    :type direction: numpy array (shape (3,))
    :param amplitude: Radiation amplitude along ``direction``.
    :type amplitude: double
    """
    __slots__ = ("_direction", "_amplitude")

    def __init__(self, direction, amplitude):
        self._direction = direction
        self._amplitude = amplitude

    @property
    def direction(self):
        return self._direction

    @property
    def amplitude(self):
        return self._amplitude

    @property
    def polarity(self):
        """``"compressional"`` when ``amplitude >= 0``, ``"dilatational"`` otherwise."""
        return polarity(self._amplitude)

    @property
    def is_compressional(self):
        return self._amplitude >= 0

    def __repr__(self):
        return f"RadiationSample(direction={self._direction}, amplitude={self._amplitude:.6g}, {self.polarity})"


def _as_generator(rng):
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def polarity_arrays(tensor, count=10000, rng=None):
    """Lower-hemisphere directions and their amplitudes, as arrays.

    Directions are drawn by inverse transform, ``theta = acos(u1)`` with ``u1``
    uniform in [0, 1) and ``phi`` uniform in [0, 2 pi), which weights them by
    ``cos(theta)``. The vertical component is forced negative.

    :param tensor: The source moment tensor.
    :type tensor: :class:`MomentTensor`
    :param count: Number of samples.
    :type count: int
    :param rng: Random source. A ``numpy.random.Generator``, a seed, or ``None``
        for a fresh generator seeded from system entropy.

    :returns: ``(directions, amplitudes)`` with shapes ``(count, 3)`` and ``(count,)``
    """
    assert isinstance(tensor, MomentTensor), \
        "polarity_arrays (Input error) - 'tensor' Should be an instance of MomentTensor"
    rng = _as_generator(rng)

    theta = np.arccos(rng.random(count))
    phi = rng.random(count)*2*np.pi

    directions = np.empty((count, 3))
    directions[:, 0] = np.sin(theta)*np.cos(phi)
    directions[:, 1] = np.sin(theta)*np.sin(phi)
    directions[:, 2] = -np.abs(np.cos(theta))
    directions /= np.linalg.norm(directions, axis=1)[:, np.newaxis]

    return directions, amplitude(directions, tensor)


def hemisphere_polarity(tensor, count=10000, rng=None):
    """Polarity samples over the lower focal hemisphere.

    See :func:`polarity_arrays` for the sampling. With a fixed seed the
    samples are reproducible.

    :returns: list of :class:`RadiationSample`

    Example::

        samples = hemisphere_polarity(mt, 5000, rng=42)
        black = [s.direction for s in samples if s.is_compressional]

    """
    directions, u = polarity_arrays(tensor, count, rng)
    return [RadiationSample(d, float(a)) for d, a in zip(directions, u)]


class LobeMesh:
    """Radiation-amplitude surface over a latitude/longitude grid.

    Vertex ``(i, j)`` sits at ``theta = i/lat_steps*pi``, ``phi = j/lon_steps*2pi``
    and is displaced radially to ``(1 + radial_scale*|u|) * direction``. The
    ``phi = 2 pi`` column repeats ``phi = 0`` so the grid wraps around.
    """
    def __init__(self, directions, radii, lat_steps, lon_steps):
        self._directions = directions
        self._radii = radii
        self._lat_steps = lat_steps
        self._lon_steps = lon_steps

    @property
    def lat_steps(self):
        return self._lat_steps

    @property
    def lon_steps(self):
        return self._lon_steps

    @property
    def shape(self):
        return (self._lat_steps + 1, self._lon_steps + 1)

    @property
    def directions(self):
        return self._directions

    @property
    def radii(self):
        return self._radii

    @property
    def vertices(self):
        """Displaced points, shape ``((lat_steps+1)*(lon_steps+1), 3)``."""
        return self._directions*self._radii[:, np.newaxis]

    @property
    def faces(self):
        """Triangle vertex indices over the grid, shape ``(2*lat_steps*lon_steps, 3)``."""
        ncols = self._lon_steps + 1
        i, j = np.meshgrid(np.arange(self._lat_steps), np.arange(self._lon_steps), indexing="ij")
        a = (i*ncols + j).ravel()
        b = a + 1
        c = a + ncols
        d = c + 1
        return np.concatenate([np.column_stack([a, c, b]), np.column_stack([b, c, d])])


def lobe_mesh(tensor, radial_scale=1.5, lat_steps=40, lon_steps=80):
    """Sample the radiation amplitude over the whole sphere.

    :param tensor: The source moment tensor.
    :type tensor: :class:`MomentTensor`
    :param radial_scale: Radial displacement per unit of ``|u|``.
    :type radial_scale: double
    :param lat_steps: Number of steps in ``theta`` over [0, pi].
    :type lat_steps: int
    :param lon_steps: Number of steps in ``phi`` over [0, 2 pi].
    :type lon_steps: int

    :rtype: :class:`LobeMesh`
    """
    assert isinstance(tensor, MomentTensor), \
        "lobe_mesh (Input error) - 'tensor' Should be an instance of MomentTensor"
    assert lat_steps > 0 and lon_steps > 0, \
        f"lobe_mesh (Input error) - grid steps must be > 0. Got lat_steps={lat_steps} lon_steps={lon_steps}"

    theta = np.arange(lat_steps + 1)/lat_steps*np.pi
    phi = np.arange(lon_steps + 1)/lon_steps*2*np.pi
    theta, phi = np.meshgrid(theta, phi, indexing="ij")

    directions = np.column_stack([
        (np.sin(theta)*np.cos(phi)).ravel(),
        (np.sin(theta)*np.sin(phi)).ravel(),
        np.cos(theta).ravel(),
    ])

    u = amplitude(directions, tensor)
    radii = 1 + radial_scale*np.abs(u)

    return LobeMesh(directions, radii, lat_steps, lon_steps)
