from .parser import _build_parser

__all__ = ['_build_parser']
