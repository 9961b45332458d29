import h5py
from focalmaker.greensfunctions import GreensFunctionStore, GREENS_NPTS


class HDF5Store(GreensFunctionStore):
    """Green's functions stored as datasets of an HDF5 file.

    Each channel is a 1-D dataset named after it under ``group``
    (``/ZSS``, ``/RDS``, ... by default). The file is opened read-only on
    every load, so the store holds no open handle.

    :param filename: HDF5 file name.
    :type filename: str
    :param group: Group holding the channel datasets.
    :type group: str
    :param npts: Trace length.
    :type npts: int
    """
    def __init__(self, filename, group="/", npts=GREENS_NPTS):
        GreensFunctionStore.__init__(self, npts)
        self._filename = filename
        self._group = group

    @property
    def filename(self):
        return self._filename

    def _load(self, channel):
        with h5py.File(self._filename, mode="r") as h5file:
            return h5file[self._group][channel][()]


GreensFunctionStore.register(HDF5Store)
