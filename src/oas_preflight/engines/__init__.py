"""External rule engines"""

from .base import RuleEngine
from .spectral import SpectralEngine, parse_spectral_output

__all__ = ["RuleEngine", "SpectralEngine", "parse_spectral_output"]
