"""
Evaluation script for baseline policies on the survival environment
"""

import argparse
import csv
import os
from typing import Callable, Dict, List, Optional

import numpy as np

from game.survivor import SurvivorEnv
from rl.configs.survivor_config import ENV_CONFIG, REWARD_CONFIG, EVAL_CONFIG


def random_policy(env: SurvivorEnv, obs: np.ndarray) -> np.ndarray:
    return env.action_space.sample()


def idle_policy(env: SurvivorEnv, obs: np.ndarray) -> np.ndarray:
    """Stand still and let the auto-attack do the work"""
    return np.zeros(2, dtype=np.int64)


def flee_policy(env: SurvivorEnv, obs: np.ndarray) -> np.ndarray:
    """Step away from the nearest enemy (first enemy slot of the observation)"""
    dx, dy = obs[7], obs[8]
    if dx == 0.0 and dy == 0.0:
        return np.zeros(2, dtype=np.int64)
    h = 1 if dx > 0 else 2
    v = 1 if dy > 0 else 2
    return np.array([h, v], dtype=np.int64)


POLICIES: Dict[str, Callable[[SurvivorEnv, np.ndarray], np.ndarray]] = {
    "random": random_policy,
    "idle": idle_policy,
    "flee": flee_policy,
}


def evaluate_policy(
    policy: str = "random",
    n_episodes: int = 5,
    seed: Optional[int] = None,
    max_steps: Optional[int] = None,
    render: bool = False,
    verbose: int = 1,
) -> Dict[str, object]:
    """
    Roll out a baseline policy

    Args:
        policy: Name of a policy in POLICIES
        n_episodes: Number of episodes to run
        seed: Random seed; episode i uses seed + i
        max_steps: Optional step cap per episode (overrides ENV_CONFIG)
        render: Whether to render the environment
        verbose: Print a line per episode when > 0
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy {policy!r}, expected one of {sorted(POLICIES)}")
    act = POLICIES[policy]

    env_kwargs = dict(ENV_CONFIG)
    if max_steps is not None:
        env_kwargs["max_steps"] = max_steps
    env = SurvivorEnv(render_mode="human" if render else None,
                      reward_config=REWARD_CONFIG, **env_kwargs)
    env.action_space.seed(seed)

    episode_rewards: List[float] = []
    episode_lengths: List[int] = []
    episode_levels: List[int] = []
    wins = 0

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            obs, reward, terminated, truncated, info = env.step(act(env, obs))
            total_reward += reward
            steps += 1

        wins += int(info["result"] == "win")
        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_levels.append(info["level"])

        if verbose > 0:
            print(f"Episode {episode + 1}/{n_episodes}: "
                  f"Reward = {total_reward:.2f}, Length = {steps}, "
                  f"Level = {info['level']}, Result = {info['result']}")

    env.close()

    results = {
        "policy": policy,
        "mean_reward": float(np.mean(episode_rewards)),
        "std_reward": float(np.std(episode_rewards)),
        "mean_length": float(np.mean(episode_lengths)),
        "mean_level": float(np.mean(episode_levels)),
        "win_rate": wins / n_episodes if n_episodes else 0.0,
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
    }

    if verbose > 0:
        print("\n" + "=" * 50)
        print(f"{policy} policy ({n_episodes} episodes):")
        print(f"Mean Reward: {results['mean_reward']:.2f} ± {results['std_reward']:.2f}")
        print(f"Mean Episode Length: {results['mean_length']:.1f}")
        print(f"Mean Level: {results['mean_level']:.2f}")
        print(f"Win Rate: {results['win_rate']:.0%}")
        print("=" * 50)

    return results


def save_results(results: List[Dict[str, object]], log_dir: str) -> str:
    """Write one summary row per policy to a CSV file"""
    os.makedirs(log_dir, exist_ok=True)
    csv_path = os.path.join(log_dir, "policy_eval.csv")
    with open(csv_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["policy", "mean_reward", "std_reward", "mean_length", "mean_level", "win_rate"])
        for r in results:
            writer.writerow([r["policy"], r["mean_reward"], r["std_reward"],
                             r["mean_length"], r["mean_level"], r["win_rate"]])
    return csv_path


def main():
    parser = argparse.ArgumentParser(description="Evaluate baseline policies")
    parser.add_argument(
        "--policy",
        type=str,
        nargs="+",
        default=EVAL_CONFIG["policies"],
        choices=sorted(POLICIES),
        help="Policies to evaluate (default: random idle)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help="Number of evaluation episodes (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Cap on steps per episode (default: one full match)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Render episodes in an arcade window",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=EVAL_CONFIG["log_dir"],
        help="Directory for the summary CSV (default: ./logs)",
    )

    args = parser.parse_args()

    all_results = []
    for name in args.policy:
        all_results.append(evaluate_policy(
            policy=name,
            n_episodes=args.n_episodes,
            seed=args.seed,
            max_steps=args.max_steps,
            render=args.render,
        ))

    csv_path = save_results(all_results, args.log_dir)
    print(f"\nSaved summary to {csv_path}")


if __name__ == "__main__":
    main()
