import abc

from focalmaker.station import Station


class SeismogramWriter(metaclass=abc.ABCMeta):
    """Base class for writing the response of a station to a file.

    :param filename: Output file name.
    :type filename: str
    :param transform_function: Optional function applied to each ``(z, r, t)``
        before writing, it must return the transformed ``(z, r, t)``.
    :type transform_function: callable
    """

    def __init__(self, filename, transform_function=None):
        self._filename = filename
        self._transform_function = transform_function

    def write(self, station):
        assert isinstance(station, Station), \
            "SeismogramWriter.write - 'station' Should be an instance of Station"
        assert station.is_initialized, \
            "SeismogramWriter.write - 'station' has no response to write"

        self.initialize(station, station.response.nsamples)
        try:
            self.write_metadata({**station.metadata, **station.response.metadata,
                                 "azimuth": station.azimuth, "distance": station.distance})
            self.write_response(station)
        finally:
            self.close()

    def transformed_response(self, station):
        z, r, t, time = station.get_response()
        if self._transform_function is not None:
            z, r, t = self._transform_function(z, r, t)
        return z, r, t, time

    @abc.abstractmethod
    def initialize(self, station, num_samples):
        raise NotImplementedError('derived class must define method initialize')

    @abc.abstractmethod
    def write_response(self, station):
        raise NotImplementedError('derived class must define method write_response')

    @abc.abstractmethod
    def write_metadata(self, metadata):
        raise NotImplementedError('derived class must define method write_metadata')

    @abc.abstractmethod
    def close(self):
        raise NotImplementedError('derived class must define method close')

    @property
    def filename(self):
        return self._filename

    @property
    def transform_function(self):
        return self._transform_function

    @transform_function.setter
    def transform_function(self, transform_function):
        self._transform_function = transform_function
