"""Public API surface for commentstrip.processing."""
__all__ = [
    "cleaner_registry",
    "scanner",
]
