"""
NexaFilter Inputs
=================

Leaf inputs: single fields and list-valued fields.
"""

from nexafilter.inputs.input import UNSET, Input
from nexafilter.inputs.array_input import ArrayInput

__all__ = [
    "UNSET",
    "Input",
    "ArrayInput",
]
