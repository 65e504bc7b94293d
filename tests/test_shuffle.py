from harsh import shuffle
from harsh.shuffle import shuffled


def test_shuffle() -> None:
    values = bytearray(b"asdfzxcvqwer")
    shuffle(values, b"1234")
    assert values == b"vdwqfrzcsxae"


def test_shuffle_is_deterministic() -> None:
    assert shuffled(b"abcdefghijklmnop", b"salt") == shuffled(b"abcdefghijklmnop", b"salt")


def test_shuffle_depends_on_salt() -> None:
    assert shuffled(b"abcdefghijklmnop", b"salt") != shuffled(b"abcdefghijklmnop", b"pepper")


def test_empty_salt_is_identity() -> None:
    values = bytearray(b"abcdefghijklmnop")
    shuffle(values, b"")
    assert values == b"abcdefghijklmnop"


def test_short_values() -> None:
    assert shuffled(b"", b"salt") == b""
    assert shuffled(b"a", b"salt") == b"a"


def test_shuffle_is_a_permutation() -> None:
    values = bytes(range(256))
    result = shuffled(values, b"this is my salt")
    assert sorted(result) == list(values)
    assert result != values
