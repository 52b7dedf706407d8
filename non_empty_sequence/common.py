"""Provide the type variables shared across the package."""
from typing import TypeVar

#: Type of the elements contained in a sequence
T = TypeVar("T")

#: Type of the elements produced by a mapping over a sequence
U = TypeVar("U")
