"""Shared models, protocols and the run report."""
from .report import FileStats, StageTimer, StripReport

__all__ = ['FileStats', 'StageTimer', 'StripReport']
