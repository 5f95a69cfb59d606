"""Basic pole balancing example.

Runs a few episodes of the non-Markov pole balancing environment with a
bang-bang controller and prints the episode lengths.
"""

import argparse
import logging

import polebench


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", help="Optional JSON environment config")
    parser.add_argument("--nb-poles", type=int, default=1, choices=(1, 2))
    parser.add_argument("--random-init", action="store_true")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--episodes", type=int, default=5)
    parser.add_argument("--max-steps", type=int, default=1000)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.config:
        config = polebench.load_config(args.config)
    else:
        config = polebench.EnvConfig(
            nb_poles=args.nb_poles, random_init=args.random_init, seed=args.seed
        )
    env = polebench.NonMarkovPoleBalancingEnv.from_config(config)
    controller = polebench.BangBangController()

    for episode in range(args.episodes):
        out = polebench.simulate(env, controller, max_steps=args.max_steps)
        print(
            f"Episode {episode}: steps={out['steps']} "
            f"terminated={out['terminated']} "
            f"return={out['rewards'].sum().item():.2f}"
        )


if __name__ == "__main__":
    main()
