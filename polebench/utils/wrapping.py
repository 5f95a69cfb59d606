"""Angle wrapping utilities for periodic state dimensions."""

from __future__ import annotations

import math

import torch

_TWO_PI = 2 * math.pi


def wrap_angles(
    tensor: torch.Tensor,
    dims: tuple[int, ...] = (0,),
    *,
    inplace: bool = False,
) -> torch.Tensor:
    """Wrap specified dimensions of a tensor to (-pi, pi].

    Applies a single ``+-2*pi`` correction per entry, which is enough for
    angles that moved by less than one revolution since they were last
    wrapped (true for one Euler step of the pole dynamics).

    Args:
        tensor: Input tensor with state dimension along the last axis.
        dims: Indices (into the last axis) that should be wrapped.
        inplace: If True, modify the tensor in place (caller must own it).

    Returns:
        A tensor with the specified dimensions wrapped.
    """
    if not dims:
        return tensor
    result = tensor if inplace else tensor.clone()
    for d in dims:
        angle = result[..., d]
        angle = torch.where(angle > math.pi, angle - _TWO_PI, angle)
        angle = torch.where(angle <= -math.pi, angle + _TWO_PI, angle)
        result[..., d] = angle
    return result
