"""
Policies controlling when sampling stops and which member of a close pair of
sequences gets removed.
"""

from physamp import _private
from physamp._private import check
from physamp.errors import InvalidInputError

import numpy as np

class Threshold:
    """
    Remove sequences while the closest remaining pair is at or below
    threshold.

    Parameters
    ----------
    threshold : float
        distance threshold (>= 0)
    """

    def __init__(self,threshold):
        self.threshold = check.check_float(threshold,
                                           "threshold",
                                           minimum_allowed=0)

    def __repr__(self):
        return f"Threshold({self.threshold})"

class TargetSize:
    """
    Remove sequences until sample_size remain.

    Parameters
    ----------
    sample_size : int
        number of sequences to keep (>= 1)
    """

    def __init__(self,sample_size):
        self.sample_size = check.check_int(sample_size,
                                           "sample_size",
                                           minimum_allowed=1)

    def __repr__(self):
        return f"TargetSize({self.sample_size})"

class PreferLonger:
    """
    Remove the member of a pair with the lower score. On equal scores, remove
    the sequence that comes later in the distance matrix.
    """

    def choose(self,i,j,scores):
        """
        Return which of the matrix indexes i < j to remove given per-index
        scores.
        """
        if scores[i] >= scores[j]:
            return j
        return i

    def __repr__(self):
        return "PreferLonger()"

class Random:
    """
    Remove either member of a pair with equal probability.

    Parameters
    ----------
    seed : int or numpy.random.Generator, optional
        seed or generator to draw coin flips from. If None, use fresh entropy
        from the operating system.

    Notes
    -----
    The generator is owned by this object and advances with every coin flip.
    Running two samples with the same Random instance (or the same
    SamplingPolicy) gives different results. To repeat a run, build a new
    Random with the same seed.
    """

    def __init__(self,seed=None):

        if issubclass(type(seed),np.random.Generator):
            self.rng = seed
        else:
            if seed is not None:
                seed = check.check_int(seed,"seed",minimum_allowed=0)
            self.rng = np.random.default_rng(seed)

    def choose(self,i,j,scores):
        """
        Return which of the matrix indexes i < j to remove. scores is ignored.
        """
        if self.rng.integers(2) == 1:
            return j
        return i

    def __repr__(self):
        return "Random()"

_STOP_CONDITIONS = (Threshold,TargetSize)
_TIE_BREAKS = (PreferLonger,Random)

class SamplingPolicy:
    """
    Stop condition and tie-break to use for a sampling run.

    Parameters
    ----------
    stop_condition : Threshold or TargetSize
        when to stop removing sequences
    tie_break : PreferLonger or Random, optional
        how to choose which sequence of a pair to remove. Defaults to
        PreferLonger().
    """

    def __init__(self,stop_condition,tie_break=None):

        if tie_break is None:
            tie_break = PreferLonger()

        if type(stop_condition) not in _STOP_CONDITIONS:
            err = f"\nstop_condition '{stop_condition}' not recognized. Should be\n"
            err += "a Threshold or TargetSize instance.\n\n"
            raise InvalidInputError(err)

        if type(tie_break) not in _TIE_BREAKS:
            err = f"\ntie_break '{tie_break}' not recognized. Should be a\n"
            err += "PreferLonger or Random instance.\n\n"
            raise InvalidInputError(err)

        self.stop_condition = stop_condition
        self.tie_break = tie_break

    def __repr__(self):
        return f"SamplingPolicy({self.stop_condition},{self.tie_break})"


def build_policy(deletion_method="threshold",
                 choice_criterion="length",
                 threshold=0.01,
                 sample_size=10,
                 seed=None):
    """
    Build a SamplingPolicy from command-line style selectors.

    Parameters
    ----------
    deletion_method : str, default="threshold"
        "threshold" removes sequences closer than threshold; "sample" removes
        sequences until sample_size remain.
    choice_criterion : str, default="length"
        "length" or "length.complete" keep the sequence with more sites (the
        scores themselves are computed by physamp.scores); "random" picks which
        sequence to remove with a coin flip.
    threshold : float, default=0.01
        distance threshold for deletion_method="threshold"
    sample_size : int, default=10
        number of sequences to keep for deletion_method="sample"
    seed : int, optional
        seed for the coin flips when choice_criterion="random"

    Returns
    -------
    SamplingPolicy
    """

    deletion_method = check.check_choice(deletion_method,
                                         "deletion_method",
                                         _private.deletion_methods)
    choice_criterion = check.check_choice(choice_criterion,
                                          "choice_criterion",
                                          _private.choice_criteria)

    if deletion_method == "threshold":
        stop_condition = Threshold(threshold)
    else:
        stop_condition = TargetSize(sample_size)

    if choice_criterion == "random":
        tie_break = Random(seed)
    else:
        tie_break = PreferLonger()

    return SamplingPolicy(stop_condition,tie_break)
