import numpy as np


COMPONENTS = ("Mrr", "Mtt", "Mpp", "Mrt", "Mrp", "Mtp")


def seismic_moment(magnitude):
    """Scalar seismic moment (N m) of a moment magnitude ``Mw``.

    .. math::

        M_0 = 10^{1.5 M_w + 9.1}

    """
    return np.power(10., 1.5*magnitude + 9.1)


class MomentTensor:
    """A symmetric moment tensor in the (r, theta, phi) basis.

    Only the six independent components are stored. Instances are not
    meant to be modified, build a new one when the source changes.

    :param Mrr, Mtt, Mpp, Mrt, Mrp, Mtp: Tensor components (N m).
    :type Mrr, Mtt, Mpp, Mrt, Mrp, Mtp: double
    :param M0: Scalar moment the tensor was built with (N m).
    :type M0: double

    Example::

        mt = MomentTensor.from_strike_dip_rake(30., 60., -90., 5.5)
        M = mt.tensor   # 3x3 numpy array

    """
    def __init__(self, Mrr, Mtt, Mpp, Mrt, Mrp, Mtp, M0=None):
        self._m = np.array([Mrr, Mtt, Mpp, Mrt, Mrp, Mtp], dtype=np.double)
        self._m.flags.writeable = False
        if M0 is None:
            M0 = np.sqrt(np.sum(self.tensor**2)/2)
        self._M0 = float(M0)

    @classmethod
    def from_strike_dip_rake(cls, strike, dip, rake, magnitude):
        return strike_dip_rake_to_moment_tensor(strike, dip, rake, magnitude)

    @property
    def Mrr(self):
        return self._m[0]

    @property
    def Mtt(self):
        return self._m[1]

    @property
    def Mpp(self):
        return self._m[2]

    @property
    def Mrt(self):
        return self._m[3]

    @property
    def Mrp(self):
        return self._m[4]

    @property
    def Mtp(self):
        return self._m[5]

    @property
    def M0(self):
        """Scalar seismic moment (N m)."""
        return self._M0

    @property
    def components(self):
        """Read-only array ``[Mrr, Mtt, Mpp, Mrt, Mrp, Mtp]``."""
        return self._m

    @property
    def tensor(self):
        """The full symmetric 3x3 matrix."""
        Mrr, Mtt, Mpp, Mrt, Mrp, Mtp = self._m
        return np.array([
            [Mrr, Mrt, Mrp],
            [Mrt, Mtt, Mtp],
            [Mrp, Mtp, Mpp],
        ])

    @property
    def trace(self):
        return self.Mrr + self.Mtt + self.Mpp

    def as_dict(self):
        return {name: float(value) for name, value in zip(COMPONENTS, self._m)}

    def principal_axes(self):
        from focalmaker.principalaxes import decompose
        return decompose(self)

    def __mul__(self, factor):
        return MomentTensor(*(self._m*factor), M0=self._M0*abs(factor))

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, MomentTensor):
            return NotImplemented
        return np.array_equal(self._m, other._m)

    def __hash__(self):
        return hash(self._m.tobytes())

    def __repr__(self):
        comps = ", ".join(f"{name}={value:.6g}" for name, value in zip(COMPONENTS, self._m))
        return f"MomentTensor({comps}, M0={self._M0:.6g})"


def strike_dip_rake_to_moment_tensor(strike, dip, rake, magnitude):
    """Double-couple moment tensor of a fault plane.

    :param strike: Fault strike (degrees).
    :type strike: double
    :param dip: Fault dip (degrees).
    :type dip: double
    :param rake: Slip rake (degrees).
    :type rake: double
    :param magnitude: Moment magnitude ``Mw``.
    :type magnitude: double

    :returns: The moment tensor, scaled by :func:`seismic_moment`.
    :rtype: :class:`MomentTensor`

    No range checking is done here. Any finite angles give a finite,
    traceless tensor.
    """
    strike = np.pi*strike/180
    dip = np.pi*dip/180
    rake = np.pi*rake/180

    sin = np.sin
    cos = np.cos

    M0 = seismic_moment(magnitude)

    Mrr = -M0*(sin(dip)*cos(rake)*sin(2*strike) +
               sin(2*dip)*sin(rake)*sin(strike)*sin(strike))
    Mtt = M0*(sin(dip)*cos(rake)*sin(2*strike) -
              sin(2*dip)*sin(rake)*cos(strike)*cos(strike))
    Mpp = M0*sin(2*dip)*sin(rake)
    Mrp = -M0*(cos(dip)*cos(rake)*cos(strike) +
               cos(2*dip)*sin(rake)*sin(strike))
    Mtp = -M0*(cos(dip)*cos(rake)*sin(strike) -
               cos(2*dip)*sin(rake)*cos(strike))
    Mrt = -M0*(sin(dip)*cos(rake)*cos(2*strike) +
               0.5*sin(2*dip)*sin(rake)*sin(2*strike))

    return MomentTensor(Mrr, Mtt, Mpp, Mrt, Mrp, Mtp, M0=M0)
