"""Custom exceptions for game-code-normalizer."""


class GameCodeNormalizerError(Exception):
    """Base exception for game-code-normalizer."""

    pass


class ConfigError(GameCodeNormalizerError, ValueError):
    """Raised when normalization options have a malformed shape."""

    pass
