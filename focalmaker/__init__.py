from focalmaker.exceptions import (FocalMakerError, MissingBasisData,
                                   NumericalDecompositionFailure, OutOfRangeParameters)
from focalmaker.momenttensor import MomentTensor, strike_dip_rake_to_moment_tensor, seismic_moment
from focalmaker.principalaxes import PrincipalAxes, decompose
from focalmaker.radiation import (RadiationSample, LobeMesh, amplitude, hemisphere_polarity,
                                  polarity_arrays, lobe_mesh)
from focalmaker.nodalplanes import NodalPlane, nodal_planes, auxiliary_plane, great_circle
from focalmaker.greensfunctions import GreensFunctionStore, GREENS_NPTS
from focalmaker.seismogram import Seismogram, NSAMPLES, DT
from focalmaker.synthesizer import CHANNEL_MAP, combine, synthesize, synthesize_async
from focalmaker.pointsource import PointSource
from focalmaker.station import Station, REFERENCE_METADATA
from focalmaker.seismogramwriter import SeismogramWriter
from focalmaker.focalmaker import FocalMaker, BeachBall

__version__ = "0.1"
