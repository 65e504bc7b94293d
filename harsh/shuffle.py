"""Salt-keyed deterministic shuffle shared by every hashid operation."""

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def shuffle(values: bytearray, salt: BytesLike) -> None:
    """Permute ``values`` in place, keyed by ``salt``.

    The draws come from cycling through the salt combined with a running
    sum, so the same inputs always give the same permutation. An empty salt
    leaves ``values`` untouched.
    """
    salt_length = len(salt)
    if salt_length == 0:
        return

    v = 0
    p = 0
    for i in range(len(values) - 1, 0, -1):
        v %= salt_length
        n = salt[v]
        p += n
        j = (n + v + p) % i
        values[i], values[j] = values[j], values[i]
        v += 1


def shuffled(values: BytesLike, salt: BytesLike) -> bytes:
    buffer = bytearray(values)
    shuffle(buffer, salt)
    return bytes(buffer)


__all__ = ["shuffle", "shuffled"]
