"""Run definition for threshold sweeps."""

from .config import RunConfig

__all__ = ['RunConfig']
