"""
Read and write distance matrices in PHYLIP square format.

The format looks like:

    3
    seqA  0.0  0.1  0.5
    seqB  0.1  0.0  0.4
    seqC  0.5  0.4  0.0

The first line holds the number of sequences; each row is a label followed by
its distance to every sequence.
"""

from physamp._private import check
from physamp.matrix import DistanceMatrix
from physamp.errors import InvalidInputError

import numpy as np
import pandas as pd

import os

def read_distance_matrix(matrix_file):
    """
    Read a PHYLIP square distance matrix file.

    Parameters
    ----------
    matrix_file : str
        file to read

    Returns
    -------
    physamp.matrix.DistanceMatrix
        distance matrix with labels in file order
    """

    if type(matrix_file) is not str:
        err = f"\nmatrix_file '{matrix_file}' should be a string.\n\n"
        raise InvalidInputError(err)

    if not os.path.isfile(matrix_file):
        err = f"\nmatrix_file '{matrix_file}' does not exist.\n\n"
        raise FileNotFoundError(err)

    with open(matrix_file) as f:
        first_line = f.readline()

    try:
        num_seqs = check.check_int(first_line.strip(),
                                   "number of sequences",
                                   minimum_allowed=1)
    except InvalidInputError as e:
        err = f"\nThe first line of '{matrix_file}' should hold the number of\n"
        err += "sequences in the matrix.\n\n"
        raise InvalidInputError(err) from e

    try:
        df = pd.read_csv(matrix_file,
                         sep=r"\s+",
                         skiprows=1,
                         header=None,
                         index_col=0,
                         na_filter=False,
                         dtype={0:str})
    except (ValueError,pd.errors.ParserError) as e:
        err = f"\nCould not parse '{matrix_file}' as a square distance matrix.\n\n"
        raise InvalidInputError(err) from e

    if df.shape != (num_seqs,num_seqs):
        err = f"\n'{matrix_file}' should hold {num_seqs} rows of {num_seqs} distances.\n"
        err += f"Found {df.shape[0]} rows of {df.shape[1]} distances.\n\n"
        raise InvalidInputError(err)

    try:
        values = df.to_numpy(dtype=float)
    except (TypeError,ValueError) as e:
        err = f"\nNot all distances in '{matrix_file}' are numbers.\n\n"
        raise InvalidInputError(err) from e

    return DistanceMatrix([str(i) for i in df.index],values)

def write_distance_matrix(matrix,out_file,overwrite=False):
    """
    Write a distance matrix in PHYLIP square format.

    Parameters
    ----------
    matrix : physamp.matrix.DistanceMatrix or pandas.DataFrame
        matrix to write
    out_file : str
        output file
    overwrite : bool, default=False
        whether or not to overwrite an existing file
    """

    if issubclass(type(matrix),pd.DataFrame):
        matrix = DistanceMatrix.from_dataframe(matrix)

    if not issubclass(type(matrix),DistanceMatrix):
        err = f"\nmatrix '{matrix}' must be a DistanceMatrix.\n\n"
        raise InvalidInputError(err)

    if type(out_file) is not str:
        err = f"\nout_file '{out_file}' should be a string.\n\n"
        raise InvalidInputError(err)

    overwrite = check.check_bool(overwrite,"overwrite")
    if os.path.isfile(out_file):
        if not overwrite:
            err = f"\nout_file '{out_file}' already exists. To overwrite, set\n"
            err += "overwrite = True.\n\n"
            raise FileExistsError(err)

    width = max([len(label) for label in matrix.labels])

    out = [f"{len(matrix)}\n"]
    for i, label in enumerate(matrix.labels):
        row = "  ".join([f"{v:.6f}" for v in np.asarray(matrix.values[i])])
        out.append(f"{label:<{width}}  {row}\n")

    with open(out_file,"w") as f:
        f.write("".join(out))
