"""
A python package for reducing redundancy in sets of biological sequences by
removing the less informative member of closely related pairs.
"""
__author__ = "Michael J. Harms"

# Submodules
from . import io
from . import sample
from . import pipeline

# Core data structures and errors
from .matrix import DistanceMatrix
from .errors import InvalidInputError, PolicyExhaustedError

# Sampling
from .sample import prune, build_policy
from .sample import SamplingPolicy, Threshold, TargetSize, PreferLonger, Random
from .scores import get_scores, count_sites, count_complete_sites
from .pipeline import sample_sequences

# Input/output functions
from .io import read_sequences, write_sequences
from .io import read_tree, tree_to_matrix
from .io import read_distance_matrix, write_distance_matrix

# physamp version
from .__version__ import __version__
