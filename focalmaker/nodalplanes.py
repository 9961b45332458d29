import numpy as np


class NodalPlane:
    """A plane through the source, given by its strike and dip in degrees.

    On the focal sphere it traces a great circle where the radiation
    amplitude of a double couple vanishes.
    """
    __slots__ = ("_strike", "_dip")

    def __init__(self, strike, dip):
        self._strike = float(strike)
        self._dip = float(dip)

    @property
    def strike(self):
        return self._strike

    @property
    def dip(self):
        return self._dip

    def great_circle(self, step=1.0):
        return great_circle(self, step)

    def __iter__(self):
        return iter((self._strike, self._dip))

    def __eq__(self, other):
        if not isinstance(other, NodalPlane):
            return NotImplemented
        return (self._strike, self._dip) == (other._strike, other._dip)

    def __hash__(self):
        return hash((self._strike, self._dip))

    def __repr__(self):
        return f"NodalPlane(strike={self._strike:.4f}, dip={self._dip:.4f})"


def nodal_planes(strike, dip, rake=None, general=False):
    """The fault plane and its auxiliary plane.

    By default the auxiliary plane is ``((strike + 90) mod 360, acos(cos(dip)*cos(90)))``.
    That reduced form ignores the rake and only matches the true auxiliary
    plane for some mechanisms. Pass ``general=True`` together with ``rake`` to
    get the plane from :func:`auxiliary_plane` instead.

    :param strike: Fault strike (degrees).
    :type strike: double
    :param dip: Fault dip (degrees).
    :type dip: double
    :param rake: Slip rake (degrees), only used when ``general=True``.
    :type rake: double
    :param general: Use the rake-dependent auxiliary plane.
    :type general: bool

    :returns: ``(fault_plane, auxiliary_plane)``
    :rtype: tuple of :class:`NodalPlane`
    """
    fault = NodalPlane(strike, dip)

    if general:
        assert rake is not None, \
            "nodal_planes (Input error) - 'rake' is required when general=True"
        aux, _ = auxiliary_plane(strike, dip, rake)
        return fault, aux

    s = np.pi*strike/180
    d = np.pi*dip/180
    aux_strike = (s + np.pi/2) % (2*np.pi)
    aux_dip = np.arccos(np.cos(d)*np.cos(np.pi/2))

    return fault, NodalPlane(aux_strike*180/np.pi, aux_dip*180/np.pi)


def _strike_dip(n, e, u):
    """Strike and dip (degrees) of the plane whose normal is ``(n, e, u)``."""
    if u < 0:
        n, e, u = -n, -e, -u

    strike = np.arctan2(e, n)*180/np.pi - 90
    strike = strike % 360

    dip = np.arctan2(np.sqrt(n*n + e*e), u)*180/np.pi
    return strike, dip


def auxiliary_plane(strike, dip, rake):
    """The auxiliary plane of a double couple.

    The slip vector of the fault plane is the normal of the auxiliary plane
    and vice versa.

    :returns: ``(plane, rake)``, the auxiliary :class:`NodalPlane` and the rake
        (degrees) of slip on it.
    """
    z = np.pi*(strike + 90)/180
    z2 = np.pi*dip/180
    z3 = np.pi*rake/180

    sl1 = -np.cos(z3)*np.cos(z) - np.sin(z3)*np.sin(z)*np.cos(z2)
    sl2 = np.cos(z3)*np.sin(z) - np.sin(z3)*np.cos(z)*np.cos(z2)
    sl3 = np.sin(z3)*np.sin(z2)
    aux_strike, aux_dip = _strike_dip(sl2, sl1, sl3)

    n1 = np.sin(z)*np.sin(z2)
    n2 = np.cos(z)*np.sin(z2)
    h1 = -sl2
    h2 = sl1
    cosine = (h1*n1 + h2*n2)/np.sqrt(h1*h1 + h2*h2)
    angle = np.arccos(np.clip(cosine, -1., 1.))*180/np.pi

    aux_rake = angle if sl3 > 0 else -angle

    return NodalPlane(aux_strike, aux_dip), float(aux_rake)


def great_circle(plane, step=1.0):
    """Points of the great circle traced by ``plane`` on the unit sphere.

    The circle is parametrized by azimuth ``a`` from 0 to 360 degrees,
    ``x = cos(a)``, ``y = sin(a)``, ``z = -tan(dip)*(x*sin(strike) - y*cos(strike))``,
    and every point is normalized to unit length.

    :param plane: The nodal plane.
    :type plane: :class:`NodalPlane`
    :param step: Azimuth increment (degrees). When it does not divide 360 the
        last interval, closing the loop at 360, is shorter.
    :type step: double

    :returns: Closed loop of unit vectors, the last row equals the first.
    :rtype: numpy array (shape (N,3))
    """
    assert isinstance(plane, NodalPlane), \
        "great_circle (Input error) - 'plane' Should be an instance of NodalPlane"
    assert step > 0, f"great_circle (Input error) - step must be > 0. Got step = {step}"

    strike = np.pi*plane.strike/180
    dip = np.pi*plane.dip/180

    nsteps = int(np.ceil(360./step - 1e-9))
    az = np.pi*np.append(np.arange(nsteps)*step, 360.)/180

    x = np.cos(az)
    y = np.sin(az)
    z = -np.tan(dip)*(x*np.sin(strike) - y*np.cos(strike))

    points = np.column_stack([x, y, z])
    points /= np.linalg.norm(points, axis=1)[:, np.newaxis]
    points[-1] = points[0]

    return points
