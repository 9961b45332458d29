from focalmaker.gf_extensions.inmemory import InMemoryStore
from focalmaker.gf_extensions.jsondirectory import JSONDirectoryStore
from focalmaker.gf_extensions.hdf5store import HDF5Store
