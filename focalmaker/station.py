import logging
import numpy as np
from focalmaker.seismogram import Seismogram

logger = logging.getLogger(__name__)

# Geometry the reference Green's functions were computed for
REFERENCE_METADATA = {
    "velocity_model": "ak135_2s",
    "distance": 600.,
    "source_depth": 10.,
}


class Station:
    """A receiver at a given azimuth from the source.

    The station stores the last synthesized response in memory as numpy
    arrays. The epicentral distance is fixed by the Green's functions used,
    it is kept here only as information.

    :param azimuth: Station azimuth from the source, clockwise from north (degrees).
    :type azimuth: double
    :param distance: Epicentral distance (km).
    :type distance: double
    :param metadata: metadata to store with the station
    :type metadata: python dictionary

    """
    def __init__(self, azimuth=0., distance=REFERENCE_METADATA["distance"], metadata=None):
        self._azimuth = float(azimuth)
        self._distance = float(distance)
        self._metadata = dict(metadata) if metadata else {}
        self._response = None

    @property
    def azimuth(self):
        return self._azimuth

    @property
    def distance(self):
        return self._distance

    @property
    def x(self):
        """Surface position (km) relative to the epicenter, x to the north and y to the east."""
        az = np.pi*self._azimuth/180
        return np.array([self._distance*np.cos(az), self._distance*np.sin(az), 0.])

    @property
    def metadata(self):
        return self._metadata

    @property
    def is_initialized(self):
        return self._response is not None

    @property
    def response(self):
        return self._response

    def set_response(self, seismogram):
        assert isinstance(seismogram, Seismogram), \
            "Station.set_response (Input error) - 'seismogram' Should be an instance of Seismogram"
        self._response = seismogram

    def get_response(self):
        """Return the recorded response of the station.

        :returns: Z (vertical), R (radial), T (transverse), t (time) response of the station.
        :retval: tuple containing numpy arrays with z, r, t, time reponse (shape (Nt,))

        Example::

            z, r, t, time = station.get_response()

        """
        assert self._response is not None, "Station.get_response - station has no response yet"
        seis = self._response
        return seis.Z, seis.R, seis.T, seis.time

    def __str__(self):
        return f"""Station @ azimuth {self._azimuth} deg, distance {self._distance} km
        Initialized: {self.is_initialized}
        metadata: {self._metadata}"""

    def save(self, npzfilename):
        """Save the state of the station to an .npz file.

        :param npzfilename: String with the name of the file to save into.
        :type npzfilename: string

        Example::

            station.save("station_results.npz")

        """
        savedict = {}

        savedict["_azimuth"] = self._azimuth
        savedict["_distance"] = self._distance
        savedict["_metadata"] = self._metadata
        savedict["_initialized"] = self.is_initialized

        if self.is_initialized:
            savedict["_z"] = self._response.Z
            savedict["_r"] = self._response.R
            savedict["_t"] = self._response.T
            savedict["_dt"] = self._response.dt
            savedict["_response_metadata"] = self._response.metadata

        np.savez(npzfilename, **savedict)

    def load(self, npzfilename):
        """Load the state of a station from an .npz file.

        :param npzfilename: String with the name of the file to load from.
        :type npzfilename: string

        Example::

            station = Station()  #creates an empty station
            station.load("station_results.npz")

        """
        logger.info(f"Loading station data from npzfilename={npzfilename}")

        with np.load(npzfilename, allow_pickle=True) as loaddict:
            self._azimuth = float(loaddict["_azimuth"])
            self._distance = float(loaddict["_distance"])
            self._metadata = loaddict["_metadata"][()]  #Extract the dict from the numpy array

            if loaddict["_initialized"]:
                self._response = Seismogram(
                    loaddict["_z"], loaddict["_r"], loaddict["_t"],
                    dt=float(loaddict["_dt"]),
                    metadata=loaddict["_response_metadata"][()])
            else:
                self._response = None
