"""Provide a sequence which is guaranteed to hold at least one element."""

from non_empty_sequence import _types

__version__ = "0.0.1"
__author__ = "The non-empty-sequence developers"
__license__ = "License :: OSI Approved :: MIT License"
__status__ = "Alpha"

NonEmptySequence = _types.NonEmptySequence

try_create = _types.try_create
seed = _types.seed
append = _types.append
