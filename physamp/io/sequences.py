"""
Read and write collections of sequences.
"""

from physamp._private import check
from physamp.errors import InvalidInputError

from Bio import SeqIO

import os

def read_sequences(sequence_file,seq_format="fasta"):
    """
    Read sequences from a file into a dictionary keyed by sequence id.

    Parameters
    ----------
    sequence_file : str
        file holding sequences
    seq_format : str, default="fasta"
        any format Bio.SeqIO can read ("fasta", "phylip-relaxed", "nexus",
        "clustal", ...)

    Returns
    -------
    dict
        dictionary keying sequence ids to Bio.SeqRecord.SeqRecord, in file
        order
    """

    if type(sequence_file) is not str:
        err = f"\nsequence_file '{sequence_file}' should be a string.\n\n"
        raise InvalidInputError(err)

    if not os.path.isfile(sequence_file):
        err = f"\nsequence_file '{sequence_file}' does not exist.\n\n"
        raise FileNotFoundError(err)

    try:
        records = list(SeqIO.parse(sequence_file,seq_format))
    except ValueError as e:
        err = f"\nCould not read '{sequence_file}' as '{seq_format}'.\n\n"
        raise InvalidInputError(err) from e

    if len(records) == 0:
        err = f"\nNo sequences found in '{sequence_file}'.\n\n"
        raise InvalidInputError(err)

    sequences = {}
    for r in records:
        if r.id in sequences:
            err = f"\nSequence id '{r.id}' appears more than once in\n"
            err += f"'{sequence_file}'. Sequence ids must be unique.\n\n"
            raise InvalidInputError(err)
        sequences[r.id] = r

    return sequences

def write_sequences(sequences,
                    labels,
                    out_file,
                    out_format="fasta",
                    overwrite=False):
    """
    Write a subset of sequences to a file.

    Parameters
    ----------
    sequences : dict
        dictionary keying labels to Bio.SeqRecord.SeqRecord
    labels : list-like
        labels of sequences to write, in output order
    out_file : str
        output file
    out_format : str, default="fasta"
        any format Bio.SeqIO can write
    overwrite : bool, default=False
        whether or not to overwrite an existing file

    Returns
    -------
    int
        number of sequences written
    """

    if type(out_file) is not str:
        err = f"\nout_file '{out_file}' should be a string.\n\n"
        raise InvalidInputError(err)

    labels = check.check_iter(labels,"labels",minimum_allowed=1,is_not_type=str)
    overwrite = check.check_bool(overwrite,"overwrite")

    if os.path.isfile(out_file):
        if not overwrite:
            err = f"\nout_file '{out_file}' already exists. To overwrite, set\n"
            err += "overwrite = True.\n\n"
            raise FileExistsError(err)

    records = []
    for label in labels:
        try:
            records.append(sequences[label])
        except KeyError:
            err = f"\nlabel '{label}' does not match any sequence.\n\n"
            raise InvalidInputError(err)

    try:
        num_written = SeqIO.write(records,out_file,out_format)
    except ValueError as e:
        err = f"\nCould not write sequences as '{out_format}'.\n\n"
        raise InvalidInputError(err) from e

    return num_written
