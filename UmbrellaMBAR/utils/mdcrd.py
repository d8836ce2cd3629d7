"""Reader for Amber ASCII trajectories (mdcrd) with periodic box lengths.

The coordinates of the snapshots are needed upstream to evaluate the reduced
potentials of every window; this module only reads them.
"""

import gzip
import itertools
import numpy as np

## every number is written with the fortran format F8.3, ten per line
FIELD_WIDTH = 8


def read_mdcrd_box(natom, filename, index=None):
    """read an Amber ASCII trajectory file including the box size

    Parameters
    ----------
    natom : int
        number of atoms in every frame.
    filename : str or path
        the trajectory file. Files ending with ".gz" are decompressed on the fly.
    index : 1D int ndarray or 1D bool ndarray of size natom, optional
        atom indices (0-based) or a boolean mask selecting the atoms to keep.
        All atoms are kept by default.

    Returns
    -------
    trj : 2D float ndarray of shape (nframe, 3*nselected)
        every row is [x(1) y(1) z(1) x(2) y(2) z(2) ...] of the selected atoms.
    box : 2D float ndarray of shape (nframe, 3)
        size of the periodic box of every frame.
    title : str
        the title line of the file.

    Reading stops at the first short or malformed record; the incomplete
    trailing frame is discarded.
    """
    if isinstance(natom, bool) or not isinstance(natom, (int, np.integer)):
        raise TypeError("natom has to be an integer.")
    if natom <= 0:
        raise ValueError("natom has to be strictly greater than 0.")

    index3 = _atom_index3(natom, index)
    natom3 = 3 * natom

    filename = str(filename).strip()
    if filename.lower().endswith(".gz"):
        opener = gzip.open
    else:
        opener = open

    trj = []
    box = []
    with opener(filename, "rt") as file_handle:
        title = file_handle.readline().rstrip("\r\n")
        values = _iter_fields(file_handle)
        while True:
            x = _take(values, natom3)
            if x is None:
                break
            b = _take(values, 3)
            if b is None:
                break
            trj.append(x[index3])
            box.append(b)

    if len(trj) == 0:
        return np.zeros((0, index3.shape[0])), np.zeros((0, 3)), title

    return np.stack(trj), np.stack(box), title


def _atom_index3(natom, index):
    if index is None:
        index = np.arange(natom)
    else:
        index = np.asarray(index)
        if index.dtype == bool:
            if index.shape != (natom,):
                raise ValueError("a boolean index has to have a length of natom.")
            index = np.flatnonzero(index)
        elif np.issubdtype(index.dtype, np.integer):
            index = index.reshape(-1)
            if np.any(index < 0) or np.any(index >= natom):
                raise ValueError("atom indices have to be in [0, natom).")
        else:
            raise TypeError("index has to be an integer or boolean array.")

    return (3 * index[:, None] + np.arange(3)[None, :]).reshape(-1)


def _iter_fields(file_handle):
    for line in file_handle:
        line = line.rstrip("\r\n")
        for start in range(0, len(line), FIELD_WIDTH):
            field = line[start : start + FIELD_WIDTH].strip()
            if not field:
                continue
            try:
                yield float(field)
            except ValueError:
                return


def _take(values, n):
    x = np.fromiter(itertools.islice(values, n), dtype=np.float64)
    if x.shape[0] < n:
        return None
    return x
