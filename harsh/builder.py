"""
Derive the working alphabet, separators and guards of a Harsh instance.

Each derivation step is a plain function from (candidate sets, salt) to new
sets, so the pipeline can be checked one step at a time:

    unique_alphabet -> alphabet_and_separators -> guards
"""
import logging
import math
from typing import Optional, Tuple, Union

from .codec import Harsh
from .errors import AlphabetLengthError, IllegalCharacterError
from .shuffle import shuffled

LOG = logging.getLogger(__name__)

DEFAULT_ALPHABET = b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
DEFAULT_SEPARATORS = b"cfhistuCFHISTU"

MINIMUM_ALPHABET_LENGTH = 16
SEPARATOR_DIV = 3.5
GUARD_DIV = 12.0

ILLEGAL_CHARACTERS = b" "

TextOrBytes = Union[str, bytes, bytearray]


def _to_bytes(value: TextOrBytes) -> bytes:
    # multi-byte utf8 characters are split into their individual bytes
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def unique_alphabet(alphabet: Optional[bytes]) -> bytes:
    if alphabet is None:
        return DEFAULT_ALPHABET

    seen = set()
    ret = bytearray()
    for item in alphabet:
        if item in ILLEGAL_CHARACTERS:
            raise IllegalCharacterError(chr(item))
        if item not in seen:
            ret.append(item)
            seen.add(item)

    if len(ret) < MINIMUM_ALPHABET_LENGTH:
        raise AlphabetLengthError()
    return bytes(ret)


def alphabet_and_separators(
    separators: Optional[bytes],
    alphabet: bytes,
    salt: bytes,
) -> Tuple[bytes, bytes]:
    if separators is None:
        separators = DEFAULT_SEPARATORS

    kept = bytes(item for item in separators if item in alphabet)
    if len(kept) != len(separators):
        LOG.debug(
            "dropped %d separator(s) not found in the alphabet",
            len(separators) - len(kept),
        )
    separators = kept
    alphabet = bytes(item for item in alphabet if item not in separators)

    separators = shuffled(separators, salt)

    if not separators or len(alphabet) / len(separators) > SEPARATOR_DIV:
        length = math.ceil(len(alphabet) / SEPARATOR_DIV)
        if length == 1:
            length = 2

        if length > len(separators):
            diff = length - len(separators)
            separators += alphabet[:diff]
            alphabet = alphabet[diff:]
        else:
            separators = separators[:length]

    alphabet = shuffled(alphabet, salt)
    return alphabet, separators


def guards(alphabet: bytes, separators: bytes) -> Tuple[bytes, bytes, bytes]:
    """Split guards off the alphabet, or off the separators when the
    alphabet is too small to spare them.

    Returns ``(alphabet, separators, guards)``.
    """
    guard_count = math.ceil(len(alphabet) / GUARD_DIV)
    if len(alphabet) < 3:
        return alphabet, separators[guard_count:], separators[:guard_count]
    return alphabet[guard_count:], separators, alphabet[:guard_count]


class HarshBuilder:
    """Configure and create a Harsh instance.

    >>> harsh = HarshBuilder().salt("this is my salt").build()
    >>> harsh.encode([1, 2, 3])
    'laHquq'
    """

    def __init__(self):
        self._salt: Optional[bytes] = None
        self._alphabet: Optional[bytes] = None
        self._separators: Optional[bytes] = None
        self._hash_length = 0

    def salt(self, salt: TextOrBytes) -> "HarshBuilder":
        self._salt = _to_bytes(salt)
        return self

    def alphabet(self, alphabet: TextOrBytes) -> "HarshBuilder":
        self._alphabet = _to_bytes(alphabet)
        return self

    def separators(self, separators: TextOrBytes) -> "HarshBuilder":
        self._separators = _to_bytes(separators)
        return self

    def length(self, hash_length: int) -> "HarshBuilder":
        """Minimum hash length. Hashes produced may be longer than this."""
        if isinstance(hash_length, bool) or not isinstance(hash_length, int):
            raise ValueError(f"expect integer hash length, got {hash_length!r}")
        if hash_length < 0:
            raise ValueError("hash length must be >= 0")
        self._hash_length = hash_length
        return self

    def build(self) -> Harsh:
        alphabet = unique_alphabet(self._alphabet)
        salt = self._salt if self._salt is not None else b""
        alphabet, separators = alphabet_and_separators(
            self._separators, alphabet, salt)
        alphabet, separators, guard_chars = guards(alphabet, separators)

        # caller separators may swallow the alphabet; base-1 numerals never terminate
        if len(alphabet) < 2:
            raise AlphabetLengthError(
                "The provided separators leave fewer than 2 alphabet characters"
            )

        LOG.debug(
            "harsh configured: alphabet=%d separators=%d guards=%d min_length=%d",
            len(alphabet), len(separators), len(guard_chars), self._hash_length,
        )
        return Harsh(
            alphabet=alphabet,
            separators=separators,
            guards=guard_chars,
            salt=salt,
            hash_length=self._hash_length,
        )


__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_SEPARATORS",
    "MINIMUM_ALPHABET_LENGTH",
    "SEPARATOR_DIV",
    "GUARD_DIV",
    "HarshBuilder",
    "unique_alphabet",
    "alphabet_and_separators",
    "guards",
]
