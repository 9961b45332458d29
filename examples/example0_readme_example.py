from focalmaker.focalmaker import FocalMaker
from focalmaker.pointsource import PointSource
from focalmaker.station import Station
from focalmaker.gf_extensions import JSONDirectoryStore
from focalmaker.tools.plotting import ZRTPlot

#Green's functions, one <CHANNEL>.json file per basis channel
#(ak135_2s velocity model, 600 km distance, 10 km source depth)
store = JSONDirectoryStore("greens/")

#Initialize Source
strike, dip, rake = 30., 45., 60.   # Fault plane angles (deg)
magnitude = 6.                      # Moment magnitude
source = PointSource([strike, dip, rake], magnitude)

#Initialize Receiver
s = Station(45., metadata={"name": "a station"})

model = FocalMaker(source, store)

model.run(s)

ZRTPlot(s, xlim=[0, 1000], show=True)
