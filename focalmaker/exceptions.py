class FocalMakerError(Exception):
    """Base class for focalmaker errors."""
    pass


class MissingBasisData(FocalMakerError, KeyError):
    """A Green's function channel could not be retrieved from a store.

    The synthesizer never lets this escape: the channel is replaced by a
    zero trace of the store length.
    """

    def __init__(self, channel, reason=""):
        self.channel = channel
        self.reason = reason
        FocalMakerError.__init__(self, channel, reason)

    def __str__(self):
        if self.reason:
            return f"Missing Green's function: {self.channel} ({self.reason})"
        return f"Missing Green's function: {self.channel}"


class NumericalDecompositionFailure(FocalMakerError, ArithmeticError):
    """The eigen-decomposition of a moment tensor did not produce real,
    finite principal axes."""
    pass


class OutOfRangeParameters(FocalMakerError, ValueError):
    """Strike, dip or rake outside of their documented ranges."""
    pass
