import logging
import numpy as np
import scipy.linalg
from focalmaker.exceptions import NumericalDecompositionFailure
from focalmaker.momenttensor import MomentTensor

logger = logging.getLogger(__name__)


class PrincipalAxes:
    """Principal axes of a moment tensor.

    Eigenvalues are ordered ``lambda_P <= lambda_B <= lambda_T``. Each axis is a
    line through the origin: the sign of the returned unit vector carries no
    meaning, consumers usually draw both ``v`` and ``-v``.

    :param eigenvalues: Eigenvalues in ascending order.
    :type eigenvalues: numpy array (shape (3,))
    :param eigenvectors: Unit eigenvectors as columns, same order as ``eigenvalues``.
    :type eigenvectors: numpy array (shape (3,3))

    """
    def __init__(self, eigenvalues, eigenvectors):
        self._values = np.asarray(eigenvalues, dtype=np.double)
        self._vectors = np.asarray(eigenvectors, dtype=np.double)

    @property
    def P(self):
        """Compressional (pressure) axis, smallest eigenvalue."""
        return self._vectors[:, 0]

    @property
    def B(self):
        """Null (intermediate) axis."""
        return self._vectors[:, 1]

    @property
    def T(self):
        """Tensional axis, largest eigenvalue."""
        return self._vectors[:, 2]

    @property
    def eigenvalues(self):
        return self._values

    @property
    def eigenvectors(self):
        return self._vectors

    @property
    def lambda_P(self):
        return self._values[0]

    @property
    def lambda_B(self):
        return self._values[1]

    @property
    def lambda_T(self):
        return self._values[2]

    def __iter__(self):
        return iter([("P", self.lambda_P, self.P),
                     ("B", self.lambda_B, self.B),
                     ("T", self.lambda_T, self.T)])

    def __str__(self):
        rep = "Principal axes\n"
        for name, value, vector in self:
            rep += f"  {name}: lambda = {value: .6e}  v = {np.array2string(vector, precision=4)}\n"
        return rep


def decompose(tensor):
    """Eigen-decomposition of a moment tensor into its P, B and T axes.

    Eigen-pairs are sorted by eigenvalue with a stable sort, so equal
    eigenvalues keep the order the solver returned them in. The smallest goes
    to P, the middle one to B and the largest to T.

    :param tensor: The moment tensor.
    :type tensor: :class:`MomentTensor`

    :returns: The principal axes.
    :rtype: :class:`PrincipalAxes`

    :raises NumericalDecompositionFailure: If the tensor is not finite or the
        solver does not produce finite, real eigen-pairs.
    """
    assert isinstance(tensor, MomentTensor), \
        "decompose (Input error) - 'tensor' Should be an instance of MomentTensor"

    M = tensor.tensor
    if not np.all(np.isfinite(M)):
        raise NumericalDecompositionFailure(f"Non-finite moment tensor {tensor!r}")

    try:
        values, vectors = scipy.linalg.eigh(M)
    except (np.linalg.LinAlgError, ValueError) as err:
        raise NumericalDecompositionFailure(f"Eigen-decomposition failed for {tensor!r}") from err

    if not (np.all(np.isfinite(values)) and np.all(np.isfinite(vectors))):
        raise NumericalDecompositionFailure(f"Eigen-decomposition of {tensor!r} is not finite")

    order = np.argsort(values, kind="stable")
    values = values[order]
    vectors = vectors[:, order]

    logger.debug(f"decompose - eigenvalues={values}")

    return PrincipalAxes(values, vectors)
