"""
Reduce a set of sequences by removing the less informative member of close
pairs.
"""

from .policy import Threshold
from .policy import TargetSize
from .policy import PreferLonger
from .policy import Random
from .policy import SamplingPolicy
from .policy import build_policy
from .pruner import prune
