"""
Exceptions raised by physamp.
"""

class InvalidInputError(ValueError):
    """
    Raised when an argument, a label set, or a sampling policy cannot be used
    for a sampling run. Subclasses ValueError so callers validating arguments
    can catch either.
    """
    pass

class PolicyExhaustedError(RuntimeError):
    """
    Raised when the sampling policy runs out of close pairs before its stop
    condition is met.
    """
    pass
