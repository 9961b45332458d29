import asyncio
import logging
import numpy as np
from focalmaker.momenttensor import MomentTensor
from focalmaker.greensfunctions import GreensFunctionStore
from focalmaker.seismogram import Seismogram, NSAMPLES, DT

logger = logging.getLogger(__name__)

# Basis channels per output component, in (SS, DD, EP, DS) / (SS, DS) order
CHANNEL_MAP = {
    "Z": ("ZSS", "ZDD", "ZEP", "ZDS"),
    "R": ("RSS", "RDD", "REP", "RDS"),
    "T": ("TSS", "TDS"),
}

ALL_CHANNELS = tuple(ch for channels in CHANNEL_MAP.values() for ch in channels)


def _window(trace, nsamples):
    """First ``nsamples`` of ``trace``, zero padded if it is shorter."""
    if len(trace) >= nsamples:
        return trace[:nsamples]
    out = np.zeros(nsamples)
    out[:len(trace)] = trace
    return out


def _combine_vertical_radial(mt, ss, dd, ep, ds, az):
    return mt.Mtt*(ss/2*np.cos(2*az) - dd/6 + ep/3) + \
        mt.Mpp*(-ss/2*np.cos(2*az) - dd/6 + ep/3) + \
        mt.Mrr*(dd/3 + ep/3) + \
        mt.Mtp*(ss*np.sin(2*az)) + \
        mt.Mrt*(ds*np.cos(az)) + \
        mt.Mrp*(ds*np.sin(az))


def _combine_transverse(mt, ss, ds, az):
    return mt.Mtt*(ss/2*np.sin(2*az)) - \
        mt.Mpp*(ss/2*np.sin(2*az)) - \
        mt.Mtp*(ss*np.cos(2*az)) + \
        mt.Mrt*(ds*np.sin(az)) - \
        mt.Mrp*(ds*np.cos(az))


def combine(tensor, azimuth, traces, nsamples=NSAMPLES, dt=DT, metadata=None):
    """Linear combination of basis traces into a Z, R, T seismogram.

    :param tensor: Source moment tensor.
    :type tensor: :class:`MomentTensor`
    :param azimuth: Station azimuth (degrees).
    :type azimuth: double
    :param traces: Basis trace for every channel of ``CHANNEL_MAP``.
    :type traces: dict
    :param nsamples: Output length. Traces are cut (or zero padded) to it.
    :type nsamples: int
    :param dt: Output sample interval (s).
    :type dt: double

    :rtype: :class:`Seismogram`
    """
    assert isinstance(tensor, MomentTensor), \
        "combine (Input error) - 'tensor' Should be an instance of MomentTensor"

    az = np.pi*azimuth/180
    basis = {ch: _window(traces[ch], nsamples) for ch in ALL_CHANNELS}

    z = _combine_vertical_radial(tensor, *(basis[ch] for ch in CHANNEL_MAP["Z"]), az)
    r = _combine_vertical_radial(tensor, *(basis[ch] for ch in CHANNEL_MAP["R"]), az)
    t = _combine_transverse(tensor, *(basis[ch] for ch in CHANNEL_MAP["T"]), az)

    meta = {"azimuth": azimuth}
    if metadata:
        meta.update(metadata)

    return Seismogram(z, r, t, dt=dt, metadata=meta)


async def synthesize_async(tensor, azimuth, store, nsamples=NSAMPLES, dt=DT, retries=0):
    """Synthesize the seismogram at a station, fetching basis traces from ``store``.

    All basis channels are fetched concurrently and resolved before any
    combination is done. A channel the store cannot provide is replaced by
    zeros of the store length and listed in ``metadata["missing_channels"]``.

    :param tensor: Source moment tensor.
    :type tensor: :class:`MomentTensor`
    :param azimuth: Station azimuth (degrees).
    :type azimuth: double
    :param store: Where to get the Green's functions from.
    :type store: :class:`GreensFunctionStore`
    :param nsamples: Output length.
    :type nsamples: int
    :param dt: Output sample interval (s).
    :type dt: double
    :param retries: Extra fetch attempts per channel before falling back to zeros.
    :type retries: int

    :rtype: :class:`Seismogram`
    """
    assert isinstance(store, GreensFunctionStore), \
        "synthesize (Input error) - 'store' Should be subclass of GreensFunctionStore"

    traces, missing = await store.resolve(ALL_CHANNELS, retries=retries)
    if missing:
        logger.warning(f"synthesize - {len(missing)} of {len(ALL_CHANNELS)} basis channels missing: {missing}")

    return combine(tensor, azimuth, traces, nsamples, dt,
                   metadata={"missing_channels": missing})


def synthesize(tensor, azimuth, store, nsamples=NSAMPLES, dt=DT, retries=0):
    """Blocking version of :func:`synthesize_async`.

    Must not be called from a running event loop, ``await synthesize_async``
    there instead.

    Example::

        store = JSONDirectoryStore("greens/")
        mt = strike_dip_rake_to_moment_tensor(30., 45., 60., 6.)
        seis = synthesize(mt, 45., store)

    """
    return asyncio.run(synthesize_async(tensor, azimuth, store, nsamples, dt, retries))
