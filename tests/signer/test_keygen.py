import pytest

from lamport.digest import hash_block
from lamport.keys import BLOCKS_PER_HALF, KeyPair, PublicKey, SecretKey
from lamport.signer import generate


@pytest.fixture(scope="module")
def key_pair():
    return generate("[9;32]")


def test_generate_returns_key_pair(key_pair):
    assert isinstance(key_pair, KeyPair)
    assert isinstance(key_pair.secret, SecretKey)
    assert isinstance(key_pair.public, PublicKey)
    assert not key_pair.secret.consumed


def test_public_blocks_are_hashes_of_secret_blocks(key_pair):
    secret, public = key_pair
    for position in range(BLOCKS_PER_HALF):
        assert public.zero[position] == hash_block(secret.block(0, position))
        assert public.one[position] == hash_block(secret.block(1, position))


def test_generation_is_deterministic():
    first = generate("monte near beast")
    second = generate("monte near beast")

    assert first.public == second.public
    assert first.secret == second.secret


def test_text_seed_matches_its_utf8_bytes():
    assert generate("sakura").public == generate(b"sakura").public


def test_different_seeds_give_different_keys():
    first = generate("[9;32]").public
    second = generate("[99;32]").public

    assert first.zero[0] != second.zero[0]
    assert first.one[0] != second.one[0]
    assert first != second


def test_public_blocks_are_pairwise_distinct(key_pair):
    public = key_pair.public
    for position in range(BLOCKS_PER_HALF - 1):
        assert public.zero[position] != public.zero[position + 1]
        assert public.one[position] != public.one[position + 1]
        assert public.zero[position] != public.one[position]


def test_empty_seed_is_accepted(caplog):
    with caplog.at_level("WARNING", logger="lamport.signer.keygen"):
        key_pair = generate(b"")

    assert key_pair.public == generate("").public
    assert "empty seed" in caplog.text


def test_seed_of_wrong_type_rejected():
    with pytest.raises(TypeError):
        generate(42)
