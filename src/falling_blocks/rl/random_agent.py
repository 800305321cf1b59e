from __future__ import annotations

import argparse
from typing import Optional

import gymnasium as gym

import falling_blocks.env  # noqa: F401  (registers the environment)
from falling_blocks.game.grid import print_board


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with uniformly random actions.")
    p.add_argument("--episodes", type=int, default=1)
    p.add_argument("--max_steps", type=int, default=5000)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--show_board", action="store_true", help="Print the final board of each episode")
    return p


def run_random(episodes: int = 1, max_steps: int = 5000, seed: Optional[int] = None, show_board: bool = False) -> float:
    env = gym.make("FallingBlocks-10x20-v0", max_episode_steps=max_steps)
    env.action_space.seed(seed)
    total_reward = 0.0
    for ep in range(episodes):
        obs, info = env.reset(seed=None if seed is None else seed + ep)
        episode_reward = 0.0
        while True:
            obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
            episode_reward += float(reward)
            if terminated or truncated:
                break
        total_reward += episode_reward
        outcome = "game over" if terminated else "truncated"
        stacked = env.unwrapped.game.board.filled_cells()
        print(
            f"Episode {ep + 1}: {outcome} after {info['steps']} steps, "
            f"score={info['score']} lines={info['lines']} level={info['level']} "
            f"cells_left={stacked}"
        )
        if show_board:
            print_board(obs["board"])
    env.close()
    print(f"Random agent total reward: {total_reward:.2f}")
    return total_reward


def main() -> None:
    args = build_parser().parse_args()
    run_random(args.episodes, args.max_steps, args.seed, args.show_board)


if __name__ == "__main__":  # pragma: no cover
    main()
