"""
Greedy removal of near-duplicate sequences from a distance matrix.
"""

from physamp._private import check
from physamp._private.interface import display_result
from physamp.matrix import DistanceMatrix
from physamp.errors import InvalidInputError, PolicyExhaustedError
from physamp.sample.policy import SamplingPolicy, Threshold, TargetSize

import numpy as np
import pandas as pd

def _check_scores(scores,labels):
    """
    Make sure scores has a non-negative integer for every label (and nothing
    else). Returns scores as an int array in matrix order.
    """

    if not hasattr(scores,"keys"):
        err = f"\nscores '{scores}' must be a dictionary keying labels to\n"
        err += "integer scores.\n\n"
        raise InvalidInputError(err)

    missing = [label for label in labels if label not in scores]
    label_set = set(labels)
    extra = [k for k in scores.keys() if k not in label_set]

    if len(missing) > 0 or len(extra) > 0:
        err = "\nscores and distance matrix must have the same labels.\n\n"
        if len(missing) > 0:
            err += "Labels in the matrix but not in scores:\n"
            for m in missing:
                err += f"    {m}\n"
            err += "\n"
        if len(extra) > 0:
            err += "Labels in scores but not in the matrix:\n"
            for e in extra:
                err += f"    {e}\n"
            err += "\n"
        raise InvalidInputError(err)

    score_array = np.zeros(len(labels),dtype=int)
    for i, label in enumerate(labels):
        score_array[i] = check.check_int(scores[label],
                                         f"scores['{label}']",
                                         minimum_allowed=0)

    return score_array

def _sorted_pairs(values):
    """
    Get all i < j pairs from a square array, sorted by distance. Pairs with
    equal distance stay in (i,j) order.

    Returns
    -------
    distances : numpy.ndarray
        sorted distances
    i_index : numpy.ndarray
        first index of each pair
    j_index : numpy.ndarray
        second index of each pair
    """

    i_index, j_index = np.triu_indices(values.shape[0],k=1)
    distances = values[i_index,j_index]

    order = np.argsort(distances,kind="stable")

    return distances[order], i_index[order], j_index[order]


def prune(matrix,scores,policy,silent=False):
    """
    Remove sequences from a distance matrix until the policy's stop condition
    is met. At each step the closest pair of remaining sequences is found and
    one member is removed according to the policy's tie-break.

    Parameters
    ----------
    matrix : physamp.matrix.DistanceMatrix or pandas.DataFrame
        pairwise distances between sequences. A dataframe must be square with
        identical index and columns.
    scores : dict
        dictionary keying every label in matrix to a non-negative integer
        score (usually a count of sites). When the tie-break is PreferLonger,
        the member of a close pair with the lower score is removed.
    policy : physamp.sample.policy.SamplingPolicy
        stop condition and tie-break
    silent : bool, default=False
        if False, report each removed sequence and a summary

    Returns
    -------
    retained : list
        labels that were kept, in matrix order
    removed : list
        labels that were removed, in the order they were removed

    Raises
    ------
    InvalidInputError
        if the inputs are not valid or the target sample size is larger than
        the number of sequences
    PolicyExhaustedError
        if the closest pairs run out before the target sample size is reached
    """

    if issubclass(type(matrix),pd.DataFrame):
        matrix = DistanceMatrix.from_dataframe(matrix)

    if not issubclass(type(matrix),DistanceMatrix):
        err = f"\nmatrix '{matrix}' must be a DistanceMatrix or a square\n"
        err += "pandas.DataFrame.\n\n"
        raise InvalidInputError(err)

    if not issubclass(type(policy),SamplingPolicy):
        err = f"\npolicy '{policy}' must be a SamplingPolicy.\n\n"
        raise InvalidInputError(err)

    silent = check.check_bool(silent,"silent")

    labels = matrix.labels
    num_seqs = len(labels)
    score_array = _check_scores(scores,labels)

    stop_condition = policy.stop_condition
    tie_break = policy.tie_break

    if type(stop_condition) is TargetSize:
        if stop_condition.sample_size > num_seqs:
            err = f"\nsample_size ({stop_condition.sample_size}) cannot be larger than the\n"
            err += f"number of sequences ({num_seqs}).\n\n"
            raise InvalidInputError(err)

    distances, i_index, j_index = _sorted_pairs(matrix.values)

    live = np.ones(num_seqs,dtype=bool)
    num_live = num_seqs
    removed = []

    # cursor points at the closest pair whose members are both still live.
    # Liveness only ever goes from True to False, so the cursor only moves
    # forward.
    cursor = 0
    num_pairs = len(distances)

    def _advance(cursor):
        while cursor < num_pairs:
            if live[i_index[cursor]] and live[j_index[cursor]]:
                break
            cursor += 1
        return cursor

    while True:

        cursor = _advance(cursor)

        if type(stop_condition) is Threshold:

            # A single live sequence has no pairs left; that's a finished run,
            # not an error.
            if cursor == num_pairs:
                break
            if distances[cursor] > stop_condition.threshold:
                break

        else:
            if num_live <= stop_condition.sample_size:
                break

            if cursor == num_pairs:
                # Only reachable with sample_size < 1, which TargetSize rejects
                err = "\nAll sequences would be removed with this sampling policy.\n\n"
                raise PolicyExhaustedError(err)

        rm = tie_break.choose(i_index[cursor],j_index[cursor],score_array)

        live[rm] = False
        num_live -= 1
        removed.append(labels[rm])

        display_result("Remove sequence",labels[rm],silent=silent)

    retained = [labels[i] for i in range(num_seqs) if live[i]]

    if type(stop_condition) is Threshold:
        display_result("Number of sequences kept",len(retained),silent=silent)
    else:
        cursor = _advance(cursor)
        if cursor < num_pairs:
            min_distance = float(distances[cursor])
        else:
            min_distance = None
        display_result("Minimal distance in final data set",
                       min_distance,
                       silent=silent)

    return retained, removed
