import numpy as np
from focalmaker.greensfunctions import GreensFunctionStore, GREENS_NPTS


class InMemoryStore(GreensFunctionStore):
    """Green's functions held in a python dictionary.

    :param traces: Basis traces by channel name.
    :type traces: dict
    :param npts: Trace length. Defaults to the length of the first trace given,
        or to ``GREENS_NPTS`` for an empty store.
    :type npts: int

    Example::

        store = InMemoryStore({"ZSS": zss, "ZDD": zdd})

    """
    def __init__(self, traces, npts=None):
        self._traces = {ch: np.array(data, dtype=np.double) for ch, data in traces.items()}
        if npts is None:
            npts = len(next(iter(self._traces.values()))) if self._traces else GREENS_NPTS
        GreensFunctionStore.__init__(self, npts)

    @property
    def channels(self):
        return list(self._traces)

    def _load(self, channel):
        return self._traces[channel]


GreensFunctionStore.register(InMemoryStore)
