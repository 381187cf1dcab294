"""
Tail Data File I/O

Reads the two-column (alpha, Cm_ac) tail data file. The file is a
free-form whitespace-separated token stream read pairwise; reading
stops at the first token that is not a finite number.
"""

from pathlib import Path
from typing import Iterable, Tuple

import numpy as np

from ..core.aero_table import AeroTable
from ..errors import DataUnavailableError


def read_tail_data(filepath: str) -> np.ndarray:
    """
    Read (alpha, Cm) pairs from a whitespace-delimited text file.

    Parameters
    ----------
    filepath : str
        Path to the tail data file

    Returns
    -------
    np.ndarray
        Array of shape (N, 2): alpha (deg), Cm_ac. N may be zero.

    Raises
    ------
    DataUnavailableError
        If the file is missing or cannot be read
    """
    try:
        with open(filepath, 'r') as f:
            tokens = f.read().split()
    except OSError as e:
        raise DataUnavailableError(filepath, e.strerror) from e
    except UnicodeDecodeError as e:
        raise DataUnavailableError(filepath, 'not a text file') from e

    values = []
    for token in tokens:
        try:
            value = float(token)
        except ValueError:
            break
        # nan and inf end the data like any other non-numeric token
        if not np.isfinite(value):
            break
        values.append(value)

    # A trailing unpaired value is dropped
    n_pairs = len(values) // 2
    return np.array(values[:2 * n_pairs], dtype=float).reshape(n_pairs, 2)


def load_aero_table(filepath: str, verbose: bool = True) -> AeroTable:
    """
    Read the tail data file into an AeroTable.

    Parameters
    ----------
    filepath : str
        Path to the tail data file
    verbose : bool, optional
        Print the number of points loaded

    Returns
    -------
    AeroTable
        Loaded table

    Raises
    ------
    DataUnavailableError
        If the file is missing or cannot be read
    EmptyDataError
        If the file holds no data points
    """
    rows = read_tail_data(filepath)
    table = AeroTable(rows)

    if verbose:
        print(f"Database: Loaded {len(table)} aerodynamic data points.")

    return table


def write_tail_data(filepath: str, rows: Iterable[Tuple[float, float]]):
    """
    Write (alpha, Cm) pairs as two whitespace-separated columns.

    Parameters
    ----------
    filepath : str
        Output path
    rows : iterable of (alpha, Cm)
        Data points, written in the given order
    """
    data = np.asarray(list(rows), dtype=float).reshape(-1, 2)
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)
    np.savetxt(filepath, data, fmt='%.6f')
