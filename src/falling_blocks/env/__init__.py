"""Gymnasium environment for Falling Blocks."""

from __future__ import annotations

from gymnasium.envs.registration import register

from .falling_blocks_env import FallingBlocksEnv

register(
    id="FallingBlocks-10x20-v0",
    entry_point="falling_blocks.env.falling_blocks_env:FallingBlocksEnv",
    max_episode_steps=10000,
)

__all__ = ["FallingBlocksEnv"]
