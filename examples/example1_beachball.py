import logging
import numpy as np
from focalmaker.focalmaker import FocalMaker
from focalmaker.pointsource import PointSource
from focalmaker.tools.plotting import BeachBallPlot

logging.basicConfig(level=logging.DEBUG)

#Normal fault
source = PointSource([30., 60., -90.], 5.5)

model = FocalMaker(source)

#Seed the polarity samples so the figure is the same on every run
ball = model.beachball(ndots=10000, rng=np.random.default_rng(0))

print(ball.tensor)
print(ball.axes)
for plane in ball.nodal_planes:
    print(plane)

n_compressional = sum(sample.is_compressional for sample in ball.samples)
print(f"{n_compressional} of {len(ball.samples)} lower-hemisphere samples are compressional")

BeachBallPlot(ball, lobe=True, show=True)
