from focalmaker.sw_extensions.csvseismogramwriter import CSVSeismogramWriter, read_csv
from focalmaker.sw_extensions.hdf5seismogramwriter import HDF5SeismogramWriter
