import numpy as np
from focalmaker.seismogramwriter import SeismogramWriter
from focalmaker.seismogram import Seismogram, DT

HEADER = "time,Z,R,T"


class CSVSeismogramWriter(SeismogramWriter):
    """Write a station response as comma separated text.

    The first line is the header ``time,Z,R,T`` followed by one row per
    sample. Values are written in their shortest round-tripping form
    (``repr``) so that :func:`read_csv` recovers them exactly. Metadata is
    not written.
    """

    def __init__(self, filename="waveforms.csv", transform_function=None):
        SeismogramWriter.__init__(self, filename, transform_function)
        self._fid = None

    def initialize(self, station, num_samples):
        if self._filename is None or self._filename == "":
            self._filename = "waveforms.csv"
        self._fid = open(self._filename, "w")

    def write_metadata(self, metadata):
        assert self._fid, "CSVSeismogramWriter.write_metadata uninitialized file"
        # time,Z,R,T has no metadata section

    def write_response(self, station):
        assert self._fid, "CSVSeismogramWriter.write_response uninitialized file"

        z, r, t, time = self.transformed_response(station)
        self._fid.write(HEADER + "\n")
        for row in np.column_stack([time, z, r, t]):
            self._fid.write(",".join(repr(float(v)) for v in row) + "\n")

    def close(self):
        assert self._fid, "CSVSeismogramWriter.close uninitialized file"
        self._fid.close()
        self._fid = None


SeismogramWriter.register(CSVSeismogramWriter)


def read_csv(filename):
    """Parse a file written by :class:`CSVSeismogramWriter`.

    :returns: The seismogram, with ``dt`` taken from the time column.
    :rtype: :class:`Seismogram`
    """
    with open(filename) as fid:
        header = fid.readline().strip()
        assert header == HEADER, \
            f"read_csv - unexpected header '{header}' in {filename}, expected '{HEADER}'"
        data = np.loadtxt(fid, delimiter=",", ndmin=2)

    if data.shape[0] == 0:
        data = np.zeros((0, 4))

    time = data[:, 0]
    dt = time[1] - time[0] if len(time) > 1 else DT

    return Seismogram(data[:, 1], data[:, 2], data[:, 3], dt=dt)
