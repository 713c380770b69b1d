"""Run definition for batch replays."""

from .config import RunConfig

__all__ = ['RunConfig']
