import json
from pathlib import Path
from focalmaker.greensfunctions import GreensFunctionStore, GREENS_NPTS


class JSONDirectoryStore(GreensFunctionStore):
    """Green's functions stored as one JSON file per channel.

    Channel ``ZSS`` is read from ``<root>/ZSS.json``, which must hold an object
    with a ``data`` field listing the trace samples::

        {"data": [0.0, 1.2e-21, ...]}

    :param root: Directory holding the JSON files.
    :type root: str or Path
    :param npts: Trace length.
    :type npts: int
    """
    def __init__(self, root, npts=GREENS_NPTS):
        GreensFunctionStore.__init__(self, npts)
        self._root = Path(root)

    @property
    def root(self):
        return self._root

    def path(self, channel):
        return self._root / f"{channel}.json"

    def _load(self, channel):
        with open(self.path(channel)) as fid:
            record = json.load(fid)
        return record["data"]


GreensFunctionStore.register(JSONDirectoryStore)
