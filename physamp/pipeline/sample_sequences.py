"""
Pipeline that reads a set of sequences and their pairwise distances, removes
redundant sequences, and writes out the sequences that survive.
"""

from physamp import _private
from physamp._private import check
from physamp._private.interface import display_result
from physamp.errors import InvalidInputError
from physamp.io import read_sequences, write_sequences
from physamp.io import tree_to_matrix, read_distance_matrix
from physamp.scores import get_scores
from physamp.sample import build_policy, prune, Threshold

import warnings
import os

def sample_sequences(sequence_file,
                     out_file,
                     input_method="tree",
                     tree_file=None,
                     matrix_file=None,
                     deletion_method="threshold",
                     threshold=0.01,
                     sample_size=10,
                     choice_criterion="length",
                     alphabet="DNA",
                     seq_format="fasta",
                     out_format="fasta",
                     seed=None,
                     overwrite=False,
                     silent=False):
    """
    Remove redundant sequences from a sequence file. Sequences are compared
    using distances from a tree or from a distance matrix file. The closest
    pair of sequences is found and the less informative sequence of the pair
    is removed. This repeats until no pair is closer than a threshold or until
    only sample_size sequences remain.

    Parameters
    ----------
    sequence_file : str
        file holding sequences. Sequence ids must match the labels in the tree
        or distance matrix.
    out_file : str
        file to write retained sequences to

    input_method : str, default="tree"
        "tree" to compute distances from tree_file; "matrix" to read them from
        matrix_file.
    tree_file : str, optional
        newick tree. Distances between sequences are the sums of branch
        lengths between leaves. Required when input_method="tree".
    matrix_file : str, optional
        PHYLIP square distance matrix. Required when input_method="matrix".

    deletion_method : str, default="threshold"
        "threshold" removes sequences until no pair is closer than threshold;
        "sample" removes sequences until sample_size remain.
    threshold : float, default=0.01
        distance threshold for deletion_method="threshold"
    sample_size : int, default=10
        number of sequences to keep for deletion_method="sample"
    choice_criterion : str, default="length"
        how to choose which sequence of a close pair to remove. "length"
        removes the sequence with fewer sites; "length.complete" removes the
        sequence with fewer complete (non-gap, unambiguous) sites; "random"
        picks one at random.
    alphabet : str, default="DNA"
        "DNA", "RNA" or "Protein". Used to decide which sites are complete.

    seq_format : str, default="fasta"
        format of sequence_file (any format Bio.SeqIO reads)
    out_format : str, default="fasta"
        format of out_file (any format Bio.SeqIO writes)
    seed : int, optional
        random seed for choice_criterion="random"
    overwrite : bool, default=False
        whether or not to overwrite out_file if it exists
    silent : bool, default=False
        whether or not to suppress output

    Returns
    -------
    retained : list
        labels of sequences written to out_file
    removed : list
        labels of sequences removed, in the order they were removed
    """

    # --------------------------------------------------------------------------
    # Check input arguments

    input_method = check.check_choice(input_method,
                                      "input_method",
                                      _private.input_methods)
    overwrite = check.check_bool(overwrite,"overwrite")
    silent = check.check_bool(silent,"silent")

    if type(out_file) is not str:
        err = f"\nout_file '{out_file}' should be a string.\n\n"
        raise InvalidInputError(err)

    if os.path.isfile(out_file) and not overwrite:
        err = f"\nout_file '{out_file}' already exists. To overwrite, set\n"
        err += "overwrite = True.\n\n"
        raise FileExistsError(err)

    if input_method == "tree" and tree_file is None:
        err = "\ntree_file must be specified when input_method is 'tree'.\n\n"
        raise InvalidInputError(err)

    if input_method == "matrix" and matrix_file is None:
        err = "\nmatrix_file must be specified when input_method is 'matrix'.\n\n"
        raise InvalidInputError(err)

    # Build the policy up front so bad selectors fail before reading files
    policy = build_policy(deletion_method=deletion_method,
                          choice_criterion=choice_criterion,
                          threshold=threshold,
                          sample_size=sample_size,
                          seed=seed)

    # --------------------------------------------------------------------------
    # Load data

    sequences = read_sequences(sequence_file,seq_format=seq_format)

    display_result("Input method",input_method,silent=silent)
    if input_method == "tree":
        if not os.path.isfile(tree_file):
            err = f"\ntree_file '{tree_file}' does not exist.\n\n"
            raise FileNotFoundError(err)
        matrix = tree_to_matrix(tree_file,silent=silent)
    else:
        matrix = read_distance_matrix(matrix_file)

    display_result("Deletion method",deletion_method,silent=silent)
    display_result("Sequence choice criterion",choice_criterion,silent=silent)
    if type(policy.stop_condition) is Threshold:
        display_result("Distance threshold",policy.stop_condition.threshold,silent=silent)
    else:
        display_result("Sample size",policy.stop_condition.sample_size,silent=silent)

    scores = get_scores(sequences,
                        matrix.labels,
                        choice_criterion=choice_criterion,
                        alphabet=alphabet)

    # --------------------------------------------------------------------------
    # Sample

    retained, removed = prune(matrix,scores,policy,silent=silent)

    if type(policy.stop_condition) is Threshold and len(retained) == 1 and len(matrix) > 1:
        w = "\nOnly one sequence survived sampling. Consider lowering the\n"
        w += "distance threshold.\n\n"
        warnings.warn(w)

    write_sequences(sequences,
                    retained,
                    out_file,
                    out_format=out_format,
                    overwrite=overwrite)

    if not silent:
        print(f"Wrote {len(retained)} sequences to '{out_file}'.",flush=True)

    return retained, removed
