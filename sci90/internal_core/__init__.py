from .config import ScoringConfig, load_config

__all__ = ["ScoringConfig", "load_config"]
