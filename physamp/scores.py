"""
Per-sequence informativeness scores used to decide which member of a close
pair to keep.
"""

from physamp import _private
from physamp._private import check
from physamp.errors import InvalidInputError

# Unambiguous states for each alphabet. Gaps, unknowns and ambiguity codes are
# not complete.
_COMPLETE_STATES = {"DNA":frozenset("ACGT"),
                    "RNA":frozenset("ACGU"),
                    "Protein":frozenset("ACDEFGHIKLMNPQRSTVWY")}

def _as_string(sequence):
    """
    Get a plain string from a str, Bio.Seq.Seq or Bio.SeqRecord.SeqRecord.
    """

    # SeqRecord
    if hasattr(sequence,"seq"):
        sequence = sequence.seq

    if sequence is None:
        err = "\nsequence must not be None.\n\n"
        raise InvalidInputError(err)

    return str(sequence)

def count_sites(sequence):
    """
    Count the number of sites in a sequence, gaps included.

    Parameters
    ----------
    sequence : str or Bio.Seq.Seq or Bio.SeqRecord.SeqRecord
        sequence to score

    Returns
    -------
    int
        number of sites
    """

    return len(_as_string(sequence))

def count_complete_sites(sequence,alphabet="DNA"):
    """
    Count the number of sites in a sequence holding an unambiguous state of
    the alphabet. Gaps, unknown characters and ambiguity codes are not
    counted.

    Parameters
    ----------
    sequence : str or Bio.Seq.Seq or Bio.SeqRecord.SeqRecord
        sequence to score
    alphabet : str, default="DNA"
        "DNA", "RNA" or "Protein"

    Returns
    -------
    int
        number of complete sites
    """

    alphabet = check.check_choice(alphabet,"alphabet",list(_COMPLETE_STATES))
    states = _COMPLETE_STATES[alphabet]

    return sum([1 for s in _as_string(sequence).upper() if s in states])

def get_scores(sequences,labels,choice_criterion="length",alphabet="DNA"):
    """
    Score each labeled sequence for use as a tie-break when sampling.

    Parameters
    ----------
    sequences : dict
        dictionary keying labels to sequences (str, Bio.Seq.Seq or
        Bio.SeqRecord.SeqRecord)
    labels : list-like
        labels to score
    choice_criterion : str, default="length"
        "length" scores by number of sites; "length.complete" scores by number
        of complete sites. "random" does not use scores, so the number of sites
        is returned.
    alphabet : str, default="DNA"
        alphabet used to decide which sites are complete

    Returns
    -------
    dict
        dictionary keying labels to integer scores
    """

    choice_criterion = check.check_choice(choice_criterion,
                                          "choice_criterion",
                                          _private.choice_criteria)
    alphabet = check.check_choice(alphabet,"alphabet",list(_COMPLETE_STATES))

    labels = check.check_iter(labels,"labels",is_not_type=str)

    missing = [label for label in labels if label not in sequences]
    if len(missing) > 0:
        err = "\nThe following labels do not match any sequence:\n\n"
        for m in missing:
            err += f"    {m}\n"
        err += "\n"
        raise InvalidInputError(err)

    scores = {}
    for label in labels:
        if choice_criterion == "length.complete":
            scores[label] = count_complete_sites(sequences[label],alphabet)
        else:
            scores[label] = count_sites(sequences[label])

    return scores
