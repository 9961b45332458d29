from focalmaker.seismogramwriter import SeismogramWriter
import h5py
import numpy as np


class HDF5SeismogramWriter(SeismogramWriter):
    """Write a station response to an HDF5 file.

    Layout::

        /Data/velocity   (3, num_samples)  rows Z, R, T
        /Data/time       (num_samples,)
        /Metadata/<key>  one dataset per metadata entry

    """

    def __init__(self, filename="case.hdf5", transform_function=None):
        SeismogramWriter.__init__(self, filename, transform_function)

        self._h5file = None

    def initialize(self, station, num_samples):
        # Form filename and create HDF5 dataset
        if self._filename is None or self._filename == "":
            self._filename = "case.hdf5"

        self._h5file = h5py.File(self._filename, mode="w")

        # Create groups
        grp_data = self._h5file.create_group("/Data")
        self._h5file.create_group("/Metadata")

        # Create data
        grp_data.create_dataset("velocity", (3, num_samples), dtype=np.double)
        grp_data.create_dataset("time", (num_samples,), dtype=np.double)

    def write_metadata(self, metadata):
        assert self._h5file, "HDF5SeismogramWriter.write_metadata uninitialized HDF5 file"

        grp_metadata = self._h5file['Metadata']
        for key, value in metadata.items():
            if isinstance(value, (list, tuple)):
                value = ",".join(str(v) for v in value)
            elif not isinstance(value, (str, int, float, np.number)):
                value = str(value)
            grp_metadata.create_dataset(key, data=value)

    def write_response(self, station):
        assert self._h5file, "HDF5SeismogramWriter.write_response uninitialized HDF5 file"

        velocity = self._h5file['Data/velocity']
        time = self._h5file['Data/time']

        zz, rr, tt, t = self.transformed_response(station)

        velocity[0, :] = zz
        velocity[1, :] = rr
        velocity[2, :] = tt
        time[:] = t

    def close(self):
        assert self._h5file, "HDF5SeismogramWriter.close uninitialized HDF5 file"

        self._h5file.close()
        self._h5file = None


SeismogramWriter.register(HDF5SeismogramWriter)
