from .path_normalizer import DEFAULT_SEPARATOR, PathNormalizer

__all__ = [
    "DEFAULT_SEPARATOR",
    "PathNormalizer",
]
