import dataclasses
import logging
import string
from typing import Iterable, List, Sequence

from .errors import DecodeError, HexError
from .shuffle import shuffle

LOG = logging.getLogger(__name__)

MAX_VALUE = 2 ** 64 - 1
HEX_CHUNK_LENGTH = 12
HEX_DIGITS = frozenset(string.hexdigits)

# one character per byte, so hashid text and its buffer have the same length
HASHID_ENCODING = "latin-1"


@dataclasses.dataclass(frozen=True)
class Harsh:
    """A hashids-compatible hasher.

    Instances are immutable: every call works on its own copy of the
    alphabet, so one instance can be shared freely between threads.

    Using the default (empty) salt makes hashids trivial to decode. This is
    not intended to be cryptographically secure either way.
    """

    alphabet: bytes
    separators: bytes
    guards: bytes
    salt: bytes = b""
    hash_length: int = 0

    @classmethod
    def builder(cls):
        from .builder import HarshBuilder
        return HarshBuilder()

    @classmethod
    def default(cls) -> "Harsh":
        return cls.builder().build()

    def encode(self, values: Sequence[int]) -> str:
        """Encode unsigned 64-bit integers into a single hashid.

        An empty sequence encodes to an empty string.
        """
        values = list(values)
        if not values:
            return ""
        for value in values:
            _check_value(value)

        nhash = _create_nhash(values)
        alphabet = bytearray(self.alphabet)

        lottery = alphabet[nhash % len(alphabet)]
        buffer = bytearray([lottery])

        for idx, value in enumerate(values):
            _reshuffle(alphabet, lottery, self.salt)
            last = _hash(value, alphabet)
            buffer += last

            if idx + 1 < len(values):
                value %= last[0] + idx
                buffer.append(self.separators[value % len(self.separators)])

        if len(buffer) < self.hash_length:
            guard_index = (nhash + buffer[0]) % len(self.guards)
            buffer.insert(0, self.guards[guard_index])

            if len(buffer) < self.hash_length:
                guard_index = (nhash + buffer[2]) % len(self.guards)
                buffer.append(self.guards[guard_index])

        half_length = len(alphabet) // 2
        while len(buffer) < self.hash_length:
            shuffle(alphabet, bytes(alphabet))
            buffer = alphabet[half_length:] + buffer + alphabet[:half_length]

            excess = len(buffer) - self.hash_length
            if excess > 0:
                marker = excess // 2
                buffer = buffer[marker:marker + self.hash_length]

        return buffer.decode(HASHID_ENCODING)

    def decode(self, hashid: str) -> List[int]:
        """Decode a hashid back into its integers.

        Raises DecodeError unless ``hashid`` is exactly what ``encode``
        produces for the decoded values under this configuration.
        """
        try:
            value = hashid.encode(HASHID_ENCODING)
        except UnicodeEncodeError:
            raise DecodeError(DecodeError.HASH) from None

        for idx, char in enumerate(value):
            if char in self.guards:
                value = value[idx + 1:]
                break
        for idx in range(len(value) - 1, -1, -1):
            if value[idx] in self.guards:
                value = value[:idx]
                break

        if len(value) < 2:
            raise DecodeError(DecodeError.HASH)

        alphabet = bytearray(self.alphabet)
        lottery = value[0]

        result = []
        for segment in _split(value[1:], self.separators):
            _reshuffle(alphabet, lottery, self.salt)
            result.append(_unhash(segment, alphabet))

        if self.encode(result) != hashid:
            LOG.debug("hashid %r does not re-encode to itself", hashid)
            raise DecodeError(DecodeError.HASH)
        return result

    def encode_hex(self, hex_string: str) -> str:
        """Encode a hex string into a hashid.

        Every chunk of 12 hex digits becomes one value, prefixed with a
        ``1`` digit so leading zeroes survive the round trip.
        """
        values = []
        for start in range(0, len(hex_string), HEX_CHUNK_LENGTH):
            chunk = hex_string[start:start + HEX_CHUNK_LENGTH]
            if not HEX_DIGITS.issuperset(chunk):
                raise HexError()
            values.append(int("1" + chunk, 16))
        return self.encode(values)

    def decode_hex(self, hashid: str) -> str:
        values = self.decode(hashid)
        return "".join(format(n, "x")[1:] for n in values)


def _check_value(value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expect integer value, got {value!r}")
    if value < 0 or value > MAX_VALUE:
        raise ValueError(f"value {value} out of range, expect 0 <= value <= 2**64 - 1")


def _create_nhash(values: Sequence[int]) -> int:
    return sum(value % (idx + 100) for idx, value in enumerate(values))


def _reshuffle(alphabet: bytearray, lottery: int, salt: bytes) -> None:
    # key is lottery + salt + current alphabet, cut to the alphabet length
    key = bytes([lottery]) + salt + alphabet
    shuffle(alphabet, key[:len(alphabet)])


def _hash(value: int, alphabet: bytes) -> bytes:
    length = len(alphabet)
    digits = bytearray()
    while True:
        value, rem = divmod(value, length)
        digits.append(alphabet[rem])
        if value == 0:
            break
    digits.reverse()
    return bytes(digits)


def _unhash(segment: bytes, alphabet: bytes) -> int:
    length = len(alphabet)
    # the place value of the leading digit must fit, even when that digit is zero
    if len(segment) > MAX_VALUE.bit_length() or (
            segment and length ** (len(segment) - 1) > MAX_VALUE):
        raise DecodeError(DecodeError.VALUE)
    number = 0
    for char in segment:
        position = alphabet.find(char)
        if position == -1:
            raise DecodeError(DecodeError.VALUE)
        number = number * length + position
        if number > MAX_VALUE:
            raise DecodeError(DecodeError.VALUE)
    return number


def _split(payload: bytes, separators: bytes) -> Iterable[bytes]:
    start = 0
    for idx, char in enumerate(payload):
        if char in separators:
            yield payload[start:idx]
            start = idx + 1
    yield payload[start:]


__all__ = ["Harsh", "MAX_VALUE"]
