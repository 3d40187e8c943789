"""game-code-normalizer: Normalize, validate and classify game redemption codes."""

from game_code_normalizer.exceptions import ConfigError, GameCodeNormalizerError
from game_code_normalizer.normalization import CodeNormalizer, NormalizeConfig, normalize_code, normalize_codes
from game_code_normalizer.schema import CodeInput, NormalizeOptions, NormalizeResult

__version__ = "0.1.0"

__all__ = [
    "normalize_code",
    "normalize_codes",
    "CodeInput",
    "CodeNormalizer",
    "ConfigError",
    "GameCodeNormalizerError",
    "NormalizeConfig",
    "NormalizeOptions",
    "NormalizeResult",
    "__version__",
]
