"""
Functions to check/process `bool`, `float`, `int`, and iterable arguments in
physamp functions.
"""

from physamp.errors import InvalidInputError

import numpy as np

def _bounds_message(variable_name,
                    minimum_allowed,
                    maximum_allowed,
                    minimum_inclusive,
                    maximum_inclusive):
    """
    Build a human-readable description of allowed bounds for an error message.
    """

    if minimum_inclusive:
        min_o = "<="
    else:
        min_o = "<"

    if maximum_inclusive:
        max_o = "<="
    else:
        max_o = "<"

    return f"{minimum_allowed} {min_o} {variable_name} {max_o} {maximum_allowed}"

def _out_of_bounds(value,
                   minimum_allowed,
                   maximum_allowed,
                   minimum_inclusive,
                   maximum_inclusive):
    """
    Return True if value falls outside of the requested bounds. None bounds
    are not checked.
    """

    if minimum_allowed is not None:
        if minimum_inclusive:
            if value < minimum_allowed:
                return True
        else:
            if value <= minimum_allowed:
                return True

    if maximum_allowed is not None:
        if maximum_inclusive:
            if value > maximum_allowed:
                return True
        else:
            if value >= maximum_allowed:
                return True

    return False


def check_bool(value,variable_name=None):
    """
    Process a `bool` argument and do error checking.

    Parameters
    ----------
    value :
        input value to check/process
    variable_name : str
        name of variable (string, for error message)

    Returns
    -------
    bool
        validated/coerced bool

    Raises
    ------
    InvalidInputError
        If value cannot be interpreted as a bool
    """

    try:

        # Strings, lists, etc. are not bools
        if hasattr(value,"__iter__"):
            raise ValueError

        # See if this is a naked type
        if type(value) is type:
            raise ValueError

        # Reject things like 0.5 that would silently round
        if value != 0:
            if not np.isclose(round(value,0)/value,1):
                raise ValueError

        value = bool(int(value))

    except (TypeError,ValueError,OverflowError):

        if variable_name is not None:
            err = f"\n{variable_name} '{value}' must be True or False.\n\n"
        else:
            err = f"\n'{value}' must be True or False.\n\n"

        raise InvalidInputError(err)

    return value


def check_float(value,
                variable_name=None,
                minimum_allowed=-np.inf,
                maximum_allowed=np.inf,
                minimum_inclusive=True,
                maximum_inclusive=True):
    """
    Process a `float` argument and do error checking.

    Parameters
    ----------
    value :
        input value to check/process
    variable_name : str
        name of variable (string, for error message)
    minimum_allowed : float, default=-np.inf
        minimum allowable value for the variable
    maximum_allowed : float, default=np.inf
        maximum allowable value for the variable
    minimum_inclusive : bool, default=True
        whether lower bound is inclusive
    maximum_inclusive : bool, default=True
        whether upper bound is inclusive

    Returns
    -------
    float
        validated/coerced float

    Raises
    ------
    InvalidInputError
        If value cannot be interpreted as a float within bounds
    """

    try:

        # bools sneak through float(); reject them explicitly
        if type(value) is bool:
            raise ValueError

        if type(value) is str:
            value = float(value)

        if hasattr(value,"__iter__"):
            raise ValueError

        if type(value) is type:
            raise ValueError

        value = float(value)

        if np.isnan(value):
            raise ValueError

        if _out_of_bounds(value,
                          minimum_allowed,
                          maximum_allowed,
                          minimum_inclusive,
                          maximum_inclusive):
            raise ValueError

    except (ValueError,TypeError):

        if variable_name is not None:
            err = f"\n{variable_name} '{value}' must be a float:\n\n"
        else:
            err = f"\n'{value}' must be a float:\n\n"

        err += _bounds_message(variable_name,
                               minimum_allowed,
                               maximum_allowed,
                               minimum_inclusive,
                               maximum_inclusive)
        err += "\n\n"

        raise InvalidInputError(err)

    return value

def check_int(value,
              variable_name=None,
              minimum_allowed=None,
              maximum_allowed=None,
              minimum_inclusive=True,
              maximum_inclusive=True):
    """
    Process an `int` argument and do error checking.

    Parameters
    ----------
    value :
        input value to check/process
    variable_name : str
        name of variable (string, for error message)
    minimum_allowed : float, optional
        minimum allowable value for the variable
    maximum_allowed : float, optional
        maximum allowable value for the variable
    minimum_inclusive : bool, default=True
        whether lower bound is inclusive
    maximum_inclusive : bool, default=True
        whether upper bound is inclusive

    Returns
    -------
    int
        validated/coerced integer

    Raises
    ------
    InvalidInputError
        If value cannot be interpreted as an int within bounds
    """

    try:

        if type(value) is bool:
            raise ValueError

        if type(value) is str:
            value = int(value)

        if hasattr(value,"__iter__"):
            raise ValueError

        if type(value) is type:
            raise ValueError

        # If this is a float to int cast, make sure it does not have decimal
        if value != np.floor(value):
            raise ValueError

        value = int(value)

        if _out_of_bounds(value,
                          minimum_allowed,
                          maximum_allowed,
                          minimum_inclusive,
                          maximum_inclusive):
            raise ValueError

    except (ValueError,TypeError,OverflowError):

        if variable_name is not None:
            err = f"\n{variable_name} '{value}' must be an integer:\n\n"
        else:
            err = f"\n'{value}' must be an integer:\n\n"

        if not (minimum_allowed is None and maximum_allowed is None):
            err += _bounds_message(variable_name,
                                   minimum_allowed,
                                   maximum_allowed,
                                   minimum_inclusive,
                                   maximum_inclusive)

        err += "\n\n"

        raise InvalidInputError(err)

    return value

def check_iter(value,
               variable_name=None,
               required_value_type=None,
               minimum_allowed=None,
               maximum_allowed=None,
               is_not_type=None):
    """
    Process an iterable argument and do error checking.

    Parameters
    ----------
    value :
        input value to check/process
    variable_name : str
        name of variable (string, for error message)
    required_value_type : type, optional, default=None
        if not None, validate that every value in the iterable has the
        specified type
    minimum_allowed : int, optional, default=None
        minimum allowable length for the iterable (inclusive)
    maximum_allowed : int, optional, default=None
        maximum allowable length for the iterable (inclusive)
    is_not_type : type, list, default=None
        type (or list of types) to reject

    Returns
    -------
    list
        validated iterable, converted to a list

    Raises
    ------
    InvalidInputError
        If value cannot be interpreted as an iterable of appropriate type
    """

    if variable_name is not None:
        err_base = f"\n{variable_name} = {value} "
    else:
        err_base = f"\n'{value}' "

    if not hasattr(value,"__iter__"):
        err = err_base + "must be list-like\n"
        raise InvalidInputError(err)

    if type(value) is type:
        err = err_base + "must not be a type\n"
        raise InvalidInputError(err)

    # Make sure iterable does not have a specified excluded type
    if is_not_type is not None:
        if type(is_not_type) is type:
            is_not_type = [is_not_type]

        if type(value) in is_not_type:
            bad_types = ",".join([f"{v}" for v in is_not_type])

            err = err_base + f"must not be of type {bad_types}\n\n"
            raise InvalidInputError(err)

    value = list(value)

    if required_value_type is not None:
        for v in value:
            if not isinstance(v,required_value_type):
                err = err_base + f"all entries must have type {required_value_type}\n"
                raise InvalidInputError(err)

    if _out_of_bounds(len(value),minimum_allowed,maximum_allowed,True,True):
        bounds = _bounds_message(variable_name,
                                 minimum_allowed,
                                 maximum_allowed,
                                 True,
                                 True)
        err = err_base + f"must have length:\n\n{bounds}\n\n"
        raise InvalidInputError(err)

    return value

def check_choice(value,variable_name,choices):
    """
    Make sure a string selector is one of an allowed set of choices.

    Parameters
    ----------
    value :
        input value to check
    variable_name : str
        name of variable (string, for error message)
    choices : list
        allowed values

    Returns
    -------
    str
        validated choice

    Raises
    ------
    InvalidInputError
        If value is not one of choices
    """

    if type(value) is not str or value not in choices:
        err = f"\n{variable_name} '{value}' not recognized. Should be one of:\n\n"
        for c in choices:
            err += f"    {c}\n"
        err += "\n"
        raise InvalidInputError(err)

    return value
