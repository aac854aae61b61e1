"""
Private utility functions that are not publicly exposed in the API.
"""

# Selectors understood by the sampling pipeline, in the same spelling the
# command line uses.
input_methods = ["tree","matrix"]
deletion_methods = ["threshold","sample"]
choice_criteria = ["length","length.complete","random"]
