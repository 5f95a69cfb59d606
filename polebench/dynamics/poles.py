"""Cart with one or more hinged poles (Gomez & Miikkulainen formulation)."""

from __future__ import annotations

from typing import Sequence

import torch

from polebench.dynamics.params import PhysicsConstants, PoleParams


def effective_force_and_mass(
    theta: torch.Tensor,
    theta_dot: torch.Tensor,
    poles: Sequence[PoleParams],
    constants: PhysicsConstants,
) -> tuple[torch.Tensor, torch.Tensor]:
    """Per-pole effective force and effective mass acting on the cart.

    Args:
        theta: Pole angles of shape ``(B, n)``.
        theta_dot: Pole angular velocities of shape ``(B, n)``.
        poles: ``n`` pole parameter sets.
        constants: Shared physical constants.

    Returns:
        ``(eff_force, eff_mass)``, each of shape ``(B, n)``.
    """
    g = constants.g
    k = constants.three_fourth
    eff_force = torch.empty_like(theta)
    eff_mass = torch.empty_like(theta)
    for i, p in enumerate(poles):
        sin_th = torch.sin(theta[:, i])
        cos_th = torch.cos(theta[:, i])
        hinge = p.mup * theta_dot[:, i] / (p.mass * p.length)
        eff_force[:, i] = (
            p.mass * p.length * theta_dot[:, i] ** 2 * sin_th
            + k * p.mass * cos_th * (hinge + g * sin_th)
        )
        eff_mass[:, i] = p.mass * (1.0 - k * cos_th**2)
    return eff_force, eff_mass


def pole_balancing_dynamics(
    x: torch.Tensor,
    u: torch.Tensor,
    *,
    poles: Sequence[PoleParams],
    constants: PhysicsConstants,
) -> torch.Tensor:
    """Batched cart/multi-pole dynamics.

    The control is used as given; clamping to the action range is the
    caller's job. ``sign(0)`` is zero, so a cart at rest feels no track
    friction.

    Args:
        x: States of shape ``(B, 2 + 2n)`` -
            ``[x, x_dot, theta_0, theta_dot_0, ..., theta_{n-1}, theta_dot_{n-1}]``.
        u: Controls of shape ``(B,)`` or ``(B, 1)`` - horizontal force.
        poles: ``n`` pole parameter sets.
        constants: Shared physical constants.

    Returns:
        State derivatives of shape ``(B, 2 + 2n)``.
    """
    n = len(poles)
    pos_dot = x[:, 1]
    theta = x[:, 2 : 2 + 2 * n : 2]
    theta_dot = x[:, 3 : 3 + 2 * n : 2]
    F = u.reshape(-1)

    eff_force, eff_mass = effective_force_and_mass(
        theta, theta_dot, poles, constants
    )
    x_ddot = (
        F - constants.track_friction * torch.sign(pos_dot) + eff_force.sum(dim=1)
    ) / (constants.cart_mass + eff_mass.sum(dim=1))

    dxdt = torch.empty_like(x)
    dxdt[:, 0] = pos_dot
    dxdt[:, 1] = x_ddot
    k = constants.three_fourth
    for i, p in enumerate(poles):
        th = theta[:, i]
        th_dot = theta_dot[:, i]
        theta_ddot = (
            -k
            * (
                x_ddot * torch.cos(th)
                + constants.g * torch.sin(th)
                + p.mup * th_dot / (p.mass * p.length)
            )
            / p.length
        )
        dxdt[:, 2 + 2 * i] = th_dot
        dxdt[:, 3 + 2 * i] = theta_ddot
    return dxdt
