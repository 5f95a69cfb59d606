from polebench.envs._base import (
    Action,
    ActionList,
    ControlSpec,
    ProblemEnv,
    StateSpec,
    StepOutput,
)
from polebench.envs.pole_balancing import NonMarkovPoleBalancingEnv

__all__ = [
    "Action",
    "ActionList",
    "ControlSpec",
    "ProblemEnv",
    "StateSpec",
    "StepOutput",
    "NonMarkovPoleBalancingEnv",
]
