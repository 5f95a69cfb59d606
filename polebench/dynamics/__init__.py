from polebench.dynamics.params import (
    PhysicsConstants,
    PhysicsState,
    PoleParams,
    PoleState,
)
from polebench.dynamics.poles import (
    effective_force_and_mass,
    pole_balancing_dynamics,
)

__all__ = [
    "PhysicsConstants",
    "PhysicsState",
    "PoleParams",
    "PoleState",
    "effective_force_and_mass",
    "pole_balancing_dynamics",
]
