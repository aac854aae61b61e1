"""
Functions to check/process arguments in physamp functions.
"""
from .standard import check_bool
from .standard import check_float
from .standard import check_int
from .standard import check_iter
from .standard import check_choice
