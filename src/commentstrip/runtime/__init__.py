from .runner import StripRunner

__all__ = ['StripRunner']
