import logging
from focalmaker.focalmaker import FocalMaker
from focalmaker.pointsource import PointSource
from focalmaker.station import Station
from focalmaker.gf_extensions import HDF5Store
from focalmaker.sw_extensions import CSVSeismogramWriter, HDF5SeismogramWriter

logging.basicConfig(level=logging.INFO)

nsamples = 4000     # Output samples
dt = 0.25           # Output time-step (s)

#Green's functions packed in a single HDF5 file, one dataset per channel
store = HDF5Store("greens.h5", group="ak135_2s")

source = PointSource([30., 45., 60.], 6.)
model = FocalMaker(source, store)

#Sweep the station around the source
for azimuth in [0., 45., 90., 135., 180.]:
    s = Station(azimuth, metadata={"name": f"az{azimuth:03.0f}"})
    model.run(s, nsamples=nsamples, dt=dt, retries=1,
        writer=CSVSeismogramWriter(f"waveforms_az{azimuth:03.0f}.csv"))

    HDF5SeismogramWriter(f"waveforms_az{azimuth:03.0f}.hdf5").write(s)
    s.save(f"station_az{azimuth:03.0f}.npz")

    print(s)
