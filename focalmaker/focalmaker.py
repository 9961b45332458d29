import asyncio
import logging
from time import perf_counter
from focalmaker.pointsource import PointSource
from focalmaker.station import Station
from focalmaker.greensfunctions import GreensFunctionStore
from focalmaker.seismogramwriter import SeismogramWriter
from focalmaker.principalaxes import decompose
from focalmaker.radiation import hemisphere_polarity, lobe_mesh
from focalmaker.nodalplanes import nodal_planes, great_circle
from focalmaker.synthesizer import synthesize_async
from focalmaker.seismogram import NSAMPLES, DT


class BeachBall:
    """Everything needed to draw the focal mechanism of a source.

    Built by :meth:`FocalMaker.beachball`, not meant to be created directly.
    """
    def __init__(self, tensor, axes, samples, lobe, planes, circles):
        self._tensor = tensor
        self._axes = axes
        self._samples = samples
        self._lobe = lobe
        self._planes = planes
        self._circles = circles

    @property
    def tensor(self):
        """The :class:`MomentTensor`."""
        return self._tensor

    @property
    def axes(self):
        """The :class:`PrincipalAxes` (P, B, T)."""
        return self._axes

    @property
    def samples(self):
        """Lower-hemisphere :class:`RadiationSample` list."""
        return self._samples

    @property
    def lobe(self):
        """The :class:`LobeMesh` radiation surface."""
        return self._lobe

    @property
    def nodal_planes(self):
        """Fault plane and auxiliary plane."""
        return self._planes

    @property
    def nodal_circles(self):
        """One closed (N,3) loop of unit vectors per nodal plane."""
        return self._circles


class FocalMaker:
    """This is the main class in focalmaker, used to link a source with the
    Green's functions and compute its focal mechanism and synthetic
    seismograms.

    :param source: Source model.
    :type source: :class:`PointSource`
    :param store: Green's functions for the synthetic seismograms. Only needed by :meth:`run`.
    :type store: :class:`GreensFunctionStore`

    Example::

        source = PointSource([30, 45, 60], 6.)
        store = JSONDirectoryStore("greens/")
        model = FocalMaker(source, store)

        ball = model.beachball(rng=0)
        s = Station(45.)
        model.run(s)

    """
    def __init__(self, source, store=None):
        assert isinstance(source, PointSource), \
            "source must be an instance of the focalmaker.PointSource class"
        assert store is None or isinstance(store, GreensFunctionStore), \
            "store must be an instance of the focalmaker.GreensFunctionStore class or None"

        self._source = source
        self._store = store
        self._tensor = source.moment_tensor()
        self._logger = logging.getLogger(__name__)

    @property
    def source(self):
        return self._source

    @property
    def store(self):
        return self._store

    @property
    def tensor(self):
        return self._tensor

    def beachball(self,
        ndots=10000,
        rng=None,
        lobe_scale=1.5,
        lat_steps=40,
        lon_steps=80,
        circle_step=1.0,
        general_auxiliary=False,
        ):
        """Compute the focal-sphere products of the source.

        :param ndots: Number of lower-hemisphere polarity samples.
        :type ndots: int
        :param rng: Random source for the polarity samples (Generator, seed or None).
        :param lobe_scale: Radial scale of the radiation lobe surface.
        :type lobe_scale: double
        :param lat_steps: Lobe grid steps in colatitude.
        :type lat_steps: int
        :param lon_steps: Lobe grid steps in longitude.
        :type lon_steps: int
        :param circle_step: Azimuth step (degrees) of the nodal great circles.
        :type circle_step: double
        :param general_auxiliary: Use the rake-dependent auxiliary plane instead of the reduced one.
        :type general_auxiliary: bool

        :rtype: :class:`BeachBall`
        """
        src = self._source
        axes = decompose(self._tensor)
        samples = hemisphere_polarity(self._tensor, ndots, rng)
        lobe = lobe_mesh(self._tensor, lobe_scale, lat_steps, lon_steps)
        planes = nodal_planes(src.strike, src.dip, src.rake, general=general_auxiliary)
        circles = [great_circle(plane, circle_step) for plane in planes]

        self._logger.debug(f"FocalMaker.beachball - {src}\n{axes}")

        return BeachBall(self._tensor, axes, samples, lobe, planes, circles)

    async def run_async(self,
        station,
        nsamples=NSAMPLES,
        dt=DT,
        writer=None,
        retries=0,
        verbose=False,
        ):
        """Awaitable version of :meth:`run`."""
        assert isinstance(station, Station), \
            "station must be an instance of the focalmaker.Station class"
        assert self._store is not None, \
            "FocalMaker.run - no Green's function store was given"

        if verbose:
            title = f"FocalMaker Run begin. {nsamples=} {dt=} azimuth={station.azimuth}"
            print(title)
            print("-"*len(title))

        self._logger.info('FocalMaker.run - starting\n\tSource: {}\n\tStation azimuth: {}\n\tnsamples: {}\n\tdt: {}'
                          .format(self._source, station.azimuth, nsamples, dt))

        perf_time_begin = perf_counter()

        seismogram = await synthesize_async(self._tensor, station.azimuth, self._store,
                                            nsamples=nsamples, dt=dt, retries=retries)
        station.set_response(seismogram)

        if writer:
            assert isinstance(writer, SeismogramWriter), \
                "'writer' must be an instance of the focalmaker.SeismogramWriter class or None"
            writer.write(station)

        perf_time_total = perf_counter() - perf_time_begin
        self._logger.info(f"FocalMaker.run - done in {perf_time_total:.4f} s. "
                          f"Missing channels: {seismogram.metadata['missing_channels']}")

        if verbose:
            print(f"FocalMaker Run done. Total time: {perf_time_total} s")

        return seismogram

    def run(self,
        station,
        nsamples=NSAMPLES,
        dt=DT,
        writer=None,
        retries=0,
        verbose=False,
        ):
        """Synthesize the seismogram at a station.

        The response is stored in the station and returned.

        :param station: Where to compute the response.
        :type station: :class:`Station`
        :param nsamples: Number of output samples.
        :type nsamples: int
        :param dt: Output time-step (s).
        :type dt: double
        :param writer: Use this writer class to store outputs
        :type writer: :class:`SeismogramWriter`
        :param retries: Extra attempts for each Green's function before using zeros.
        :type retries: int

        :rtype: :class:`Seismogram`
        """
        return asyncio.run(self.run_async(station, nsamples, dt, writer, retries, verbose))
