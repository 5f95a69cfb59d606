"""End-to-end rollouts through the public package API."""

import torch
import pytest

import polebench


class TestSimulate:
    def test_constant_push_terminates(self) -> None:
        env = polebench.NonMarkovPoleBalancingEnv(nb_poles=1)
        out = polebench.simulate(env, polebench.ConstantController(10.0))
        assert out["terminated"] is True
        assert 0 < out["steps"] < 50
        assert out["observations"].shape == (out["steps"] + 1, 4)
        assert out["rewards"].shape == (out["steps"] + 1,)
        assert out["rewards"][0].item() == 1.0

    def test_max_steps_limit(self) -> None:
        env = polebench.NonMarkovPoleBalancingEnv(nb_poles=1)
        out = polebench.simulate(env, polebench.ConstantController(0.0), max_steps=25)
        # Upright with no force is an equilibrium
        assert out["terminated"] is False
        assert out["steps"] == 25
        assert torch.equal(out["rewards"], torch.ones(26, dtype=torch.float64))

    @pytest.mark.parametrize("nb_poles", [1, 2])
    def test_bang_bang_outlasts_constant_push(self, nb_poles: int) -> None:
        env = polebench.NonMarkovPoleBalancingEnv(nb_poles=nb_poles)
        pushed = polebench.simulate(env, polebench.ConstantController(10.0))
        balanced = polebench.simulate(
            env, polebench.BangBangController(), max_steps=500
        )
        assert balanced["steps"] > pushed["steps"]

    def test_random_starts_reproducible(self) -> None:
        runs = []
        for _ in range(2):
            env = polebench.NonMarkovPoleBalancingEnv(
                nb_poles=2, random_init=True, seed=123
            )
            runs.append(
                polebench.simulate(env, polebench.BangBangController(), max_steps=100)
            )
        assert torch.equal(runs[0]["observations"], runs[1]["observations"])


class TestPublicApi:
    def test_exports(self) -> None:
        for name in polebench.__all__:
            assert hasattr(polebench, name)

    def test_custom_dynamics_fn(self) -> None:
        def frozen(x, u, **kwargs):
            return torch.zeros_like(x)

        env = polebench.NonMarkovPoleBalancingEnv(dynamics_fn=frozen)
        env.initialize()
        env.step(10.0)
        assert torch.equal(env.states, torch.zeros(4, dtype=torch.float64))
