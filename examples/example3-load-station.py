from focalmaker.station import Station
from focalmaker.sw_extensions import read_csv
from focalmaker.tools.plotting import ZRTPlot

s = Station()
s.load("station_az045.npz")

print(s)
print(read_csv("waveforms_az045.csv"))

# Visualize results
ZRTPlot(s, show=True, integrate=1)
