"""Base problem environment: action registries, observation buffer, step output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

import torch

from polebench.utils.wrapping import wrap_angles


@dataclass(frozen=True)
class StateSpec:
    """Specification of the internal state space.

    Attributes:
        dim: State-space dimension.
        wrap_dims: Indices of angular dimensions that wrap to ``(-pi, pi]``.
            Pass an empty tuple for systems with no periodic dimensions.
    """

    dim: int
    wrap_dims: tuple[int, ...] = ()


@dataclass(frozen=True)
class ControlSpec:
    """Specification of the continuous control space.

    Attributes:
        dim: Control dimension.
        lower_bounds: Per-dimension lower bounds (1-D tensor of length ``dim``).
        upper_bounds: Per-dimension upper bounds (1-D tensor of length ``dim``).
    """

    dim: int
    lower_bounds: torch.Tensor
    upper_bounds: torch.Tensor


@dataclass(frozen=True)
class Action:
    """An action a controller can take, addressed by ``id``.

    Attributes:
        id: Index of the action in its registry.
        values: One value per control dimension.
    """

    id: int
    values: tuple[float, ...]

    def at(self, dim: int) -> float:
        return self.values[dim]


class ActionList:
    """Ordered registry of actions."""

    def __init__(self) -> None:
        self._actions: list[Action] = []

    def push_back(self, index: int, value: float) -> Action:
        """Register a one-dimensional action with the given index."""
        if index != len(self._actions):
            raise IndexError(
                f"Actions must be registered in order; expected index "
                f"{len(self._actions)}, got {index}"
            )
        action = Action(id=index, values=(float(value),))
        self._actions.append(action)
        return action

    def set_entry(self, index: int, value: float) -> None:
        """Replace the value of an existing action."""
        self._actions[index] = Action(id=index, values=(float(value),))

    def __getitem__(self, index: int) -> Action:
        return self._actions[index]

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions)

    def values(self) -> list[float]:
        return [a.at(0) for a in self._actions]


ActionLike = Union[Action, float, int, torch.Tensor]


@dataclass(frozen=True)
class StepOutput:
    """What the environment emits after ``initialize`` or ``step``.

    Attributes:
        observation: Copy of the observation vector.
        reward: Primary reward signal.
        z: Secondary signal.
        terminal: Whether the episode has ended.
    """

    observation: torch.Tensor
    reward: float
    z: float
    terminal: bool


class ProblemEnv:
    """Single-instance episodic environment.

    Subclasses own their physics state and implement :meth:`initialize`,
    :meth:`step`, :meth:`end_of_episode`, :meth:`reward`, :meth:`z` and
    :meth:`_project_observation`. The base class owns the observation
    buffer, the discrete and continuous action registries and the last
    emitted :class:`StepOutput`.

    Args:
        state_spec: Internal state-space specification.
        control_spec: Continuous control-space specification.
        observation_dim: Length of the observation vector.
        dtype: Floating-point type of state and observation tensors.
    """

    def __init__(
        self,
        state_spec: StateSpec,
        control_spec: ControlSpec,
        observation_dim: int,
        *,
        dtype: torch.dtype = torch.float64,
    ) -> None:
        self.state_spec = state_spec
        self.control_spec = control_spec
        self.observation_dim = observation_dim
        self.dtype = dtype

        self.discrete_actions = ActionList()
        self.continuous_actions = ActionList()

        self._lb = self.control_spec.lower_bounds.to(dtype)
        self._ub = self.control_spec.upper_bounds.to(dtype)

        self.states = torch.zeros(state_spec.dim, dtype=dtype)
        self.observations = torch.zeros(observation_dim, dtype=dtype)
        self.output: StepOutput | None = None

    # ------------------------------------------------------------------
    # Subclass interface
    # ------------------------------------------------------------------

    def initialize(self) -> StepOutput:
        raise NotImplementedError

    def step(self, action: ActionLike) -> StepOutput:
        raise NotImplementedError

    def end_of_episode(self) -> bool:
        raise NotImplementedError

    def reward(self) -> float:
        raise NotImplementedError

    def z(self) -> float:
        """Secondary signal; zero unless a subclass defines one."""
        return 0.0

    def _project_observation(self) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def reset(self) -> StepOutput:
        """Alias of :meth:`initialize`."""
        return self.initialize()

    def _action_value(self, action: ActionLike) -> torch.Tensor:
        """Read the force of *action* as a ``(control_dim,)`` tensor."""
        if isinstance(action, Action):
            values = [action.at(d) for d in range(self.control_spec.dim)]
            return torch.tensor(values, dtype=self.dtype)
        if isinstance(action, torch.Tensor):
            return action.to(self.dtype).reshape(self.control_spec.dim)
        if isinstance(action, (int, float)) and not isinstance(action, bool):
            return torch.full((self.control_spec.dim,), float(action), dtype=self.dtype)
        raise TypeError(f"Unsupported action type: {type(action).__name__}")

    def _clamp_controls(self, u: torch.Tensor) -> torch.Tensor:
        """Clamp each control dimension to its bounds."""
        return torch.max(torch.min(u, self._ub), self._lb)

    def _wrap(self, x: torch.Tensor, *, inplace: bool = False) -> torch.Tensor:
        """Wrap angular dimensions if any."""
        if self.state_spec.wrap_dims:
            return wrap_angles(x, self.state_spec.wrap_dims, inplace=inplace)
        return x

    def update_step(self) -> StepOutput:
        """Refresh the observation buffer and record the step output."""
        self._project_observation()
        self.output = StepOutput(
            observation=self.observations.clone(),
            reward=self.reward(),
            z=self.z(),
            terminal=self.end_of_episode(),
        )
        return self.output
