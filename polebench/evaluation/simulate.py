"""Episode rollout loop."""

from __future__ import annotations

import logging
from typing import Any, Callable

import torch

from polebench.envs._base import ActionLike, ProblemEnv

logger = logging.getLogger(__name__)


@torch.no_grad()
def simulate(
    env: ProblemEnv,
    controller: Callable[[torch.Tensor], ActionLike],
    *,
    max_steps: int = 1000,
) -> dict[str, Any]:
    """Run one episode from ``env.initialize()``.

    At each step the controller maps the current observation to an action.
    The rollout stops when the episode ends or after *max_steps* steps.

    Args:
        env: Environment to drive. It is re-initialized first.
        controller: Callable ``observation -> action``.
        max_steps: Safety limit on the number of steps.

    Returns:
        A dict with keys:
        - ``"observations"``: ``(T+1, D_obs)`` observations, including the
          initial one.
        - ``"rewards"``: ``(T+1,)`` rewards matching the observations.
        - ``"terminated"``: whether the episode ended before *max_steps*.
        - ``"steps"``: number of steps taken ``T``.
    """
    out = env.initialize()
    observations = [out.observation]
    rewards = [out.reward]
    steps = 0

    while not out.terminal and steps < max_steps:
        out = env.step(controller(out.observation))
        observations.append(out.observation)
        rewards.append(out.reward)
        steps += 1

    if out.terminal:
        logger.debug("Episode terminated after %d steps", steps)

    return {
        "observations": torch.stack(observations),
        "rewards": torch.tensor(rewards, dtype=env.dtype),
        "terminated": out.terminal,
        "steps": steps,
    }
