"""Reversibly encode integers into short, salted, hashids-compatible strings."""

from .builder import HarshBuilder
from .codec import MAX_VALUE, Harsh
from .config import HarshConfig, load_config, save_config
from .errors import (
    AlphabetLengthError,
    BuildHarshError,
    DecodeError,
    HarshError,
    HexError,
    IllegalCharacterError,
)
from .shuffle import shuffle

__all__ = [
    "AlphabetLengthError",
    "BuildHarshError",
    "DecodeError",
    "Harsh",
    "HarshBuilder",
    "HarshConfig",
    "HarshError",
    "HexError",
    "IllegalCharacterError",
    "MAX_VALUE",
    "load_config",
    "save_config",
    "shuffle",
]

__version__ = "0.1.0"
