"""Physical parameters and state snapshots for the cart and its poles."""

from __future__ import annotations

from dataclasses import dataclass

import torch


@dataclass(frozen=True)
class PoleParams:
    """Immutable parameters of a single hinged pole.

    Attributes:
        length: Half-length of the pole (m).
        mass: Pole mass (kg).
        mup: Coefficient of friction of the pole's hinge.
    """

    length: float
    mass: float
    mup: float = 0.0


@dataclass(frozen=True)
class PhysicsConstants:
    """Constants shared by every pole on the cart.

    Attributes:
        g: Gravitational acceleration (m/s^2). Negative by convention: the
            gravity terms of the equations of motion are written with this
            sign, which makes the upright position unstable.
        cart_mass: Cart mass ``M`` (kg).
        track_friction: Coefficient of friction of the cart on the track.
        three_fourth: Geometry constant of a uniform rod hinged at one end.
        dt: Euler integration time step (s).
    """

    g: float = -9.81
    cart_mass: float = 1.0
    track_friction: float = 0.0
    three_fourth: float = 0.75
    dt: float = 0.02


@dataclass(frozen=True)
class PoleState:
    """Angle and angular velocity of one pole, with its parameters."""

    theta: float
    theta_dot: float
    params: PoleParams


@dataclass(frozen=True)
class PhysicsState:
    """Snapshot of the full cart/pole state.

    The environment stores its state as a flat tensor
    ``[x, x_dot, theta_0, theta_dot_0, theta_1, theta_dot_1, ...]``;
    this class gives a per-pole view of it.
    """

    x: float
    x_dot: float
    poles: tuple[PoleState, ...]

    @classmethod
    def from_tensor(
        cls, state: torch.Tensor, poles: tuple[PoleParams, ...]
    ) -> PhysicsState:
        values = state.tolist()
        return cls(
            x=values[0],
            x_dot=values[1],
            poles=tuple(
                PoleState(
                    theta=values[2 + 2 * i],
                    theta_dot=values[3 + 2 * i],
                    params=p,
                )
                for i, p in enumerate(poles)
            ),
        )

    def to_tensor(self, dtype: torch.dtype = torch.float64) -> torch.Tensor:
        values = [self.x, self.x_dot]
        for pole in self.poles:
            values.extend((pole.theta, pole.theta_dot))
        return torch.tensor(values, dtype=dtype)

    @property
    def thetas(self) -> tuple[float, ...]:
        return tuple(p.theta for p in self.poles)
