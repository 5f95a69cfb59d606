"""Fixed baseline controllers acting on observations."""

from __future__ import annotations

import torch


class ConstantController:
    """Always applies the same force.

    Args:
        force: Force returned for every observation.
    """

    def __init__(self, force: float = 0.0) -> None:
        self.force = force

    def __call__(self, observation: torch.Tensor) -> float:
        return self.force


class BangBangController:
    """Pushes the cart under the observed pole's lean with full force.

    The switching signal is ``theta + gain * theta_dot`` of the first
    observed pole; a positive lean is corrected by a positive push.

    Args:
        max_force: Magnitude of the applied force.
        gain: Weight of the angular velocity in the switching signal.
    """

    def __init__(self, max_force: float = 10.0, gain: float = 0.5) -> None:
        self.max_force = max_force
        self.gain = gain

    def __call__(self, observation: torch.Tensor) -> float:
        signal = observation[2] + self.gain * observation[3]
        return self.max_force if signal.item() > 0 else -self.max_force
