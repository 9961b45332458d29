import abc
import asyncio
import logging
import numpy as np
from focalmaker.exceptions import MissingBasisData

logger = logging.getLogger(__name__)

GREENS_NPTS = 15520


class GreensFunctionStore(metaclass=abc.ABCMeta):
    """Keyed source of elementary Green's function traces.

    A store maps a channel name (``ZSS``, ``RDS``, ``TSS``, ...) to a time
    sampled basis seismogram of fixed length ``npts``. Traces handed out are
    read-only numpy arrays, consumers must copy before modifying.

    Derived classes implement :meth:`_load`, which should raise
    :class:`MissingBasisData` (or ``KeyError``/``OSError``/``ValueError``) when
    the channel is not available.

    :param npts: Length of every basis trace in this store.
    :type npts: int
    """

    def __init__(self, npts=GREENS_NPTS):
        assert npts > 0, "GreensFunctionStore - npts must be > 0. Got npts = {}".format(npts)
        self._npts = int(npts)

    @property
    def npts(self):
        return self._npts

    @abc.abstractmethod
    def _load(self, channel):
        raise NotImplementedError('derived class must define method _load')

    def get(self, channel):
        """Return the basis trace for ``channel``.

        :raises MissingBasisData: If the channel cannot be retrieved.
        """
        try:
            data = self._load(channel)
            if data is None:
                raise MissingBasisData(channel, "no data")
            trace = np.array(data, dtype=np.double)
        except MissingBasisData:
            raise
        except (KeyError, OSError, ValueError, TypeError) as err:
            raise MissingBasisData(channel, str(err)) from err

        if trace.ndim != 1:
            raise MissingBasisData(channel, f"expected a 1-D trace, got shape {trace.shape}")
        trace.flags.writeable = False
        return trace

    async def fetch(self, channel):
        """Awaitable version of :meth:`get`. Runs the load in a worker thread."""
        return await asyncio.to_thread(self.get, channel)

    def zeros(self):
        """Zero-filled trace of the store length, used in place of missing channels."""
        trace = np.zeros(self._npts)
        trace.flags.writeable = False
        return trace

    async def fetch_or_zeros(self, channel, retries=0):
        """Fetch ``channel``, falling back to :meth:`zeros` on failure.

        :param retries: Extra attempts before giving up on the channel.
        :type retries: int

        :returns: ``(trace, found)``
        """
        for attempt in range(retries + 1):
            try:
                return await self.fetch(channel), True
            except MissingBasisData as err:
                if attempt < retries:
                    logger.warning(f"{err} - retrying ({attempt + 1} of {retries})")
                else:
                    logger.warning(f"{err} - using zeros (npts={self._npts})")
        return self.zeros(), False

    async def resolve(self, channels, retries=0):
        """Fetch several channels concurrently.

        Every channel ends up either with its trace or with zeros.

        :returns: ``(traces, missing)`` where ``traces`` maps channel name to
            trace and ``missing`` lists the channels that fell back to zeros.
        """
        channels = list(dict.fromkeys(channels))
        results = await asyncio.gather(*[self.fetch_or_zeros(ch, retries) for ch in channels])

        traces = {}
        missing = []
        for ch, (trace, found) in zip(channels, results):
            traces[ch] = trace
            if not found:
                missing.append(ch)
            logger.debug(f"resolve - {ch}: {'ok' if found else 'missing'} ({len(trace)} samples)")

        return traces, missing

    def __getitem__(self, channel):
        return self.get(channel)

    def __contains__(self, channel):
        try:
            self.get(channel)
        except MissingBasisData:
            return False
        return True
