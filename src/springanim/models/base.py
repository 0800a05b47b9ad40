# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Structural interface for the values a spring can animate.

A vector quantity is anything closed under addition, negation and
multiplication by a real scalar (on either side). Python floats, numpy
arrays and small user-defined point classes all qualify without
registering anywhere.
"""

from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class VectorQuantity(Protocol):
    def __add__(self, other): ...

    def __neg__(self): ...

    def __mul__(self, scalar): ...

    def __rmul__(self, scalar): ...


T = TypeVar("T", bound=VectorQuantity)
