"""Non-Markov pole balancing environment.

A cart on a bounded track carrying one or two hinged poles, after
Gomez & Miikkulainen, "Incremental Evolution of Complex General Behavior"
(1996). The controller sees the cart position and velocity plus the angle
and angular velocity of every other pole, starting with the first.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import torch

from polebench.config import (
    EnvConfig,
    PoleTable,
    build_pole_table,
    check_init_ranges,
    init_ranges,
    validate_nb_poles,
)
from polebench.dynamics.params import PhysicsState
from polebench.dynamics.poles import pole_balancing_dynamics
from polebench.envs._base import (
    ActionLike,
    ControlSpec,
    ProblemEnv,
    StateSpec,
    StepOutput,
)

logger = logging.getLogger(__name__)


class NonMarkovPoleBalancingEnv(ProblemEnv):
    """Cart with ``nb_poles`` hinged poles, integrated with explicit Euler.

    State: ``[x, x_dot, theta_0, theta_dot_0, (theta_1, theta_dot_1)]``,
    control: horizontal force on the cart. Pole angles wrap to
    ``(-pi, pi]``.

    Args:
        nb_poles: Number of poles, 1 or 2.
        random_init: Start episodes from a random near-upright state.
        init_preset: Name of the random start ranges (``"narrow"``).
        seed: Seed for the environment's own generator.
        generator: Random generator to use instead of a seeded one.
        dynamics_fn: Override dynamics (default: ``pole_balancing_dynamics``).
        dtype: Floating-point type of state and observation tensors.

    Raises:
        ConfigurationError: If ``nb_poles`` is not 1 or 2, or if the random
            start ranges reach the termination bounds.
    """

    def __init__(
        self,
        nb_poles: int = 1,
        random_init: bool = False,
        *,
        init_preset: str = "narrow",
        seed: int | None = None,
        generator: torch.Generator | None = None,
        dynamics_fn: Callable[..., torch.Tensor] | None = None,
        dtype: torch.dtype = torch.float64,
    ) -> None:
        nb_poles = validate_nb_poles(nb_poles)
        table: PoleTable = build_pole_table(nb_poles)
        if dynamics_fn is None:
            dynamics_fn = pole_balancing_dynamics

        state_spec = StateSpec(
            dim=2 + 2 * nb_poles,
            wrap_dims=tuple(2 + 2 * i for i in range(nb_poles)),
        )
        control_spec = ControlSpec(
            dim=1,
            lower_bounds=torch.tensor([table.bounds.action.low]),
            upper_bounds=torch.tensor([table.bounds.action.high]),
        )
        super().__init__(
            state_spec=state_spec,
            control_spec=control_spec,
            observation_dim=2 + 2 * nb_poles,
            dtype=dtype,
        )

        self.nb_poles = nb_poles
        self.random_init = random_init
        self.poles = table.poles
        self.constants = table.constants
        self.bounds = table.bounds
        self.dt = table.constants.dt
        self.dynamics_fn = dynamics_fn
        self.init_x_range, self.init_theta_range = init_ranges(init_preset)
        check_init_ranges(self.init_x_range, self.init_theta_range, self.bounds)

        if generator is None:
            generator = torch.Generator()
            if seed is None:
                generator.seed()
            else:
                generator.manual_seed(seed)
        self.generator = generator

        action_range = self.bounds.action
        self.discrete_actions.push_back(0, action_range.low)
        self.discrete_actions.push_back(1, 0.0)
        self.discrete_actions.push_back(2, action_range.high)
        # Continuous action count and default may be overridden by callers.
        self.continuous_actions.push_back(0, 0.0)

        logger.debug(
            "Created %s with %d pole(s), random_init=%s",
            type(self).__name__,
            nb_poles,
            random_init,
        )

    @classmethod
    def from_config(
        cls, config: EnvConfig, **kwargs: Any
    ) -> NonMarkovPoleBalancingEnv:
        """Build an environment from an :class:`EnvConfig`."""
        return cls(
            nb_poles=config.nb_poles,
            random_init=config.random_init,
            init_preset=config.init_preset,
            seed=config.seed,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # State views
    # ------------------------------------------------------------------

    @property
    def x(self) -> float:
        return self.states[0].item()

    @property
    def x_dot(self) -> float:
        return self.states[1].item()

    @property
    def theta(self) -> torch.Tensor:
        return self.states[2::2].clone()

    @property
    def theta_dot(self) -> torch.Tensor:
        return self.states[3::2].clone()

    @property
    def physics_state(self) -> PhysicsState:
        return PhysicsState.from_tensor(self.states, self.poles)

    # ------------------------------------------------------------------
    # Episode lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> StepOutput:
        """Start a new episode and emit the first observation."""
        states = torch.zeros(self.state_spec.dim, dtype=self.dtype)
        if self.random_init:
            states[0] = self.init_x_range.sample(
                generator=self.generator, dtype=self.dtype
            )
            states[2::2] = self.init_theta_range.sample(
                (self.nb_poles,), generator=self.generator, dtype=self.dtype
            )
        self.states = self._wrap(states, inplace=True)
        logger.debug("Episode initialized at %s", self.states)
        return self.update_step()

    def step(self, action: ActionLike) -> StepOutput:
        """Apply *action* for one time step and emit the new observation.

        The force is read from the first control dimension and clamped to
        the action range.
        """
        u = self._clamp_controls(self._action_value(action))
        x = self.states.unsqueeze(0)
        dxdt = self.dynamics_fn(
            x, u.unsqueeze(0), poles=self.poles, constants=self.constants
        )
        next_states = (x + dxdt * self.dt).squeeze(0)
        self.states = self._wrap(next_states, inplace=True)
        return self.update_step()

    def end_of_episode(self) -> bool:
        """True once the cart leaves the track or any pole falls too far."""
        if not bool(self.bounds.track.contains(self.states[0])):
            return True
        return not bool(self.bounds.angle.contains(self.states[2::2]).all())

    # ------------------------------------------------------------------
    # Signals
    # ------------------------------------------------------------------

    def reward(self) -> float:
        """Sum of the cosines of the pole angles."""
        return torch.cos(self.states[2::2]).sum().item()

    def _project_observation(self) -> None:
        obs = self.observations
        obs[0] = self.bounds.track.bound(self.states[0])
        obs[1] = self.states[1]
        # Every other pole is visible; the rest only act through the dynamics.
        for i in range(0, self.nb_poles, 2):
            obs[i + 2] = self.states[2 + 2 * i]
            obs[i + 3] = self.states[3 + 2 * i]
