import numpy as np

NSAMPLES = 4000
DT = 0.25


class Seismogram:
    """Three-component synthetic ground motion at a station.

    Components are vertical (``Z``), radial (``R``) and transverse (``T``),
    sampled every ``dt`` seconds starting at ``t = 0``.

    :param z: Vertical component.
    :type z: numpy array (Nt,)
    :param r: Radial component.
    :type r: numpy array (Nt,)
    :param t: Transverse component.
    :type t: numpy array (Nt,)
    :param dt: Sample interval (s).
    :type dt: double
    :param metadata: Information about how the seismogram was made.
    :type metadata: dict
    """
    def __init__(self, z, r, t, dt=DT, metadata=None):
        z = np.asarray(z, dtype=np.double)
        r = np.asarray(r, dtype=np.double)
        t = np.asarray(t, dtype=np.double)
        assert z.shape == r.shape == t.shape and z.ndim == 1, \
            "Seismogram (Input error) - components must be 1-D and of equal length. " \
            "Got Z{} R{} T{}".format(z.shape, r.shape, t.shape)
        assert dt > 0, "Seismogram (Input error) - dt must be > 0. Got dt = {}".format(dt)

        self._z = z
        self._r = r
        self._t = t
        self._dt = dt
        self._metadata = dict(metadata) if metadata else {}

    @property
    def Z(self):
        return self._z

    @property
    def R(self):
        return self._r

    @property
    def T(self):
        return self._t

    @property
    def dt(self):
        return self._dt

    @property
    def nsamples(self):
        return len(self._z)

    @property
    def time(self):
        """Sample times ``i*dt``."""
        return np.arange(self.nsamples)*self._dt

    @property
    def metadata(self):
        return self._metadata

    def __len__(self):
        return self.nsamples

    def __getitem__(self, component):
        return {"Z": self._z, "R": self._r, "T": self._t}[component]

    def __str__(self):
        return f"""Seismogram with {self.nsamples} samples (dt = {self._dt} s)
        max |Z| = {np.abs(self._z).max(initial=0.):.6e}
        max |R| = {np.abs(self._r).max(initial=0.):.6e}
        max |T| = {np.abs(self._t).max(initial=0.):.6e}
        metadata: {self._metadata}"""
