"""
Pipelines that tie together the steps of a physamp run.
"""

from .sample_sequences import sample_sequences
