import numpy as np
from focalmaker.exceptions import OutOfRangeParameters
from focalmaker.momenttensor import strike_dip_rake_to_moment_tensor

STRIKE_RANGE = (0., 360.)
DIP_RANGE = (0., 90.)
RAKE_RANGE = (-180., 180.)


class PointSource:
    """A double-couple source that is a point.

    Defined by the orientation of its fault plane and slip direction, and by
    its moment magnitude.

    :param angles: Orientation of the fault ``angles = [strike, dip, rake]`` in degrees.
    :type angles: numpy array or list (shape (3,))
    :param magnitude: Moment magnitude ``Mw``.
    :type magnitude: double
    :param validate: Reject angles outside ``strike in [0, 360]``,
        ``dip in [0, 90]`` and ``rake in [-180, 180]``. With ``validate=False``
        any finite angles are accepted and used as given.
    :type validate: bool

    :raises OutOfRangeParameters: If ``validate`` is set and an angle is out of range.

    Example::

        source = PointSource([30, 60, -90], 5.5)
        mt = source.moment_tensor()

    """
    def __init__(self, angles, magnitude, validate=True):
        if isinstance(angles, (list, tuple)):
            angles = np.array(angles, dtype=np.double)

        assert isinstance(angles, np.ndarray) and angles.shape == (3,), \
            "PointSource (Input error) - 'angles' Should be a numpy array with angles.shape=(3,)"
        assert np.all(np.isfinite(angles)) and np.isfinite(magnitude), \
            "PointSource (Input error) - 'angles' and 'magnitude' must be finite"

        if validate:
            for name, value, (lo, hi) in zip(("strike", "dip", "rake"), angles,
                                             (STRIKE_RANGE, DIP_RANGE, RAKE_RANGE)):
                if not lo <= value <= hi:
                    raise OutOfRangeParameters(
                        f"PointSource - {name}={value} outside of [{lo}, {hi}]")

        self._angles = angles.copy()
        self._angles.flags.writeable = False
        self._magnitude = float(magnitude)

    @property
    def angles(self):
        """Numpy array with the (strike,dip,rake) angles of the source fault plane in degrees"""
        return self._angles

    @property
    def strike(self):
        return self._angles[0]

    @property
    def dip(self):
        return self._angles[1]

    @property
    def rake(self):
        return self._angles[2]

    @property
    def magnitude(self):
        return self._magnitude

    def moment_tensor(self):
        """The :class:`MomentTensor` of this source."""
        return strike_dip_rake_to_moment_tensor(self.strike, self.dip, self.rake, self._magnitude)

    def __str__(self):
        return f"PointSource strike={self.strike} dip={self.dip} rake={self.rake} Mw={self._magnitude}"
