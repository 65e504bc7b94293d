import dataclasses
import json
from typing import Optional

from .builder import HarshBuilder
from .codec import Harsh

CONFIG_VERSION = "v1"


@dataclasses.dataclass
class HarshConfig:
    salt: str = ""
    alphabet: Optional[str] = None
    separators: Optional[str] = None
    min_length: int = 0
    version: str = CONFIG_VERSION

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "salt": self.salt,
            "alphabet": self.alphabet,
            "separators": self.separators,
            "min_length": self.min_length,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HarshConfig":
        version = data.get("version", CONFIG_VERSION)
        if version != CONFIG_VERSION:
            raise ValueError(f"Unsupported harsh config version: {version}")
        min_length = int(data.get("min_length") or 0)
        if min_length < 0:
            raise ValueError("min_length must be >= 0")
        salt = data.get("salt") or ""
        alphabet = data.get("alphabet")
        separators = data.get("separators")
        return cls(
            salt=salt,
            alphabet=alphabet,
            separators=separators,
            min_length=min_length,
            version=version,
        )

    def to_builder(self) -> HarshBuilder:
        builder = HarshBuilder().salt(self.salt).length(self.min_length)
        if self.alphabet is not None:
            builder.alphabet(self.alphabet)
        if self.separators is not None:
            builder.separators(self.separators)
        return builder

    def build(self) -> Harsh:
        return self.to_builder().build()


def save_config(config: HarshConfig, path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
        f.write("\n")


def load_config(path) -> HarshConfig:
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return HarshConfig.from_dict(raw)


__all__ = ["HarshConfig", "save_config", "load_config"]
