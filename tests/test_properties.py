import random
from typing import List

import pytest

from harsh import MAX_VALUE, DecodeError, Harsh, HarshBuilder

SEEDS = range(5)


def random_values(rng: random.Random) -> List[int]:
    count = rng.randint(1, 8)
    return [
        rng.choice([rng.randint(0, 1000), rng.randint(0, MAX_VALUE)])
        for _ in range(count)
    ]


def random_string(rng: random.Random, length: int) -> str:
    return "".join(chr(rng.randint(0x20, 0x7e)) for _ in range(length))


@pytest.mark.parametrize("seed", SEEDS)
def test_encode_always_decodable(seed: int) -> None:
    rng = random.Random(seed)
    harsh = HarshBuilder().salt(random_string(rng, 10)).build()
    for _ in range(50):
        values = random_values(rng)
        assert harsh.decode(harsh.encode(values)) == values


@pytest.mark.parametrize("length", [0, 1, 10, 999, 1000])
def test_min_length_always_met(length: int) -> None:
    harsh = HarshBuilder().length(length).build()
    encoded = harsh.encode([1, 2, 3])
    assert len(encoded) >= length
    assert harsh.decode(encoded) == [1, 2, 3]


@pytest.mark.parametrize("seed", SEEDS)
def test_random_min_length_always_met(seed: int) -> None:
    rng = random.Random(seed)
    for _ in range(20):
        length = rng.randint(0, 80)
        harsh = HarshBuilder().salt("this is my salt").length(length).build()
        values = random_values(rng)
        encoded = harsh.encode(values)
        assert len(encoded) >= length
        assert harsh.decode(encoded) == values


@pytest.mark.parametrize("seed", SEEDS)
def test_decode_never_fails_unexpectedly(seed: int) -> None:
    rng = random.Random(seed)
    harsh = Harsh.default()
    for _ in range(200):
        hashid = random_string(rng, rng.randint(0, 20))
        try:
            harsh.decode(hashid)
        except DecodeError:
            pass


@pytest.mark.parametrize("seed", SEEDS)
def test_appended_foreign_character_is_rejected(seed: int) -> None:
    rng = random.Random(seed)
    harsh = HarshBuilder().salt("this is my salt").length(rng.randint(0, 20)).build()
    for _ in range(20):
        encoded = harsh.encode(random_values(rng))
        with pytest.raises(DecodeError):
            harsh.decode(encoded + "$")


@pytest.mark.parametrize("seed", SEEDS)
def test_mutated_last_character_is_rejected(seed: int) -> None:
    rng = random.Random(seed)
    harsh = HarshBuilder().salt(random_string(rng, 10)).length(rng.randint(0, 20)).build()
    candidates = (harsh.alphabet + harsh.separators).decode("ascii")
    for _ in range(5):
        values = random_values(rng)
        encoded = harsh.encode(values)
        for char in candidates:
            if char == encoded[-1]:
                continue
            mutated = encoded[:-1] + char
            try:
                decoded = harsh.decode(mutated)
            except DecodeError:
                continue
            assert decoded != values
