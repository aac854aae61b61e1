"""
Input/output functions for physamp.
"""

from .sequences import read_sequences
from .sequences import write_sequences
from .tree import read_tree
from .tree import tree_to_matrix
from .distance_matrix import read_distance_matrix
from .distance_matrix import write_distance_matrix
