class HarshError(ValueError):
    """Harsh Error"""


class BuildHarshError(HarshError):
    """Raised when a Harsh instance cannot be configured"""


class AlphabetLengthError(BuildHarshError):

    def __init__(self, message=None):
        super().__init__(
            message or "The provided alphabet does not contain enough unique characters"
        )


class IllegalCharacterError(BuildHarshError):

    def __init__(self, character: str):
        self.character = character
        super().__init__(
            f"The provided alphabet contains an illegal character ({character!r})"
        )


class DecodeError(HarshError):
    """Raised when a hashid is not a product of this configuration"""

    VALUE = "value"
    HASH = "hash"

    _MESSAGES = {
        VALUE: "Found bad value",
        HASH: "Malformed hashid",
    }

    def __init__(self, kind: str):
        if kind not in self._MESSAGES:
            raise ValueError(f"Unknown decode error kind: {kind}")
        self.kind = kind
        super().__init__(self._MESSAGES[kind])


class HexError(HarshError):

    def __init__(self, message=None):
        super().__init__(message or "Failed to decode hex value")


__all__ = [
    "HarshError",
    "BuildHarshError",
    "AlphabetLengthError",
    "IllegalCharacterError",
    "DecodeError",
    "HexError",
]
