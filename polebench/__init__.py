"""polebench: non-Markov cart/pole balancing benchmark environments."""

from polebench.config import (
    Bounds,
    ConfigurationError,
    EnvConfig,
    build_pole_table,
    load_config,
)
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
from polebench.envs._base import (
    Action,
    ActionList,
    ControlSpec,
    ProblemEnv,
    StateSpec,
    StepOutput,
)
from polebench.envs.pole_balancing import NonMarkovPoleBalancingEnv
from polebench.evaluation.controller import BangBangController, ConstantController
from polebench.evaluation.simulate import simulate
from polebench.utils.ranges import BoundedRange
from polebench.utils.wrapping import wrap_angles

__all__ = [
    # Configuration
    "Bounds",
    "ConfigurationError",
    "EnvConfig",
    "build_pole_table",
    "load_config",
    # Dynamics
    "PhysicsConstants",
    "PhysicsState",
    "PoleParams",
    "PoleState",
    "effective_force_and_mass",
    "pole_balancing_dynamics",
    # Environments
    "Action",
    "ActionList",
    "ControlSpec",
    "ProblemEnv",
    "StateSpec",
    "StepOutput",
    "NonMarkovPoleBalancingEnv",
    # Evaluation
    "BangBangController",
    "ConstantController",
    "simulate",
    # Utilities
    "BoundedRange",
    "wrap_angles",
]
