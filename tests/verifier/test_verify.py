import pytest

from lamport.keys import BLOCK_SIZE, Signature
from lamport.signer import generate, sign
from lamport.verifier import verify


@pytest.fixture
def signed():
    secret, public = generate("[9;32]")
    message = "sakura"
    return public, message, sign(secret, message)


def test_sign_and_verify(signed):
    public, message, signature = signed
    assert verify(public, message, signature)


def test_verify_accepts_bytes_and_text_messages(signed):
    public, message, signature = signed
    assert verify(public, message.encode("utf-8"), signature)


def test_verify_wrong_message_fails(signed):
    public, _, signature = signed
    assert not verify(public, "message", signature)


def test_verify_with_public_half_as_signature_fails(signed):
    public, message, _ = signed
    assert not verify(public, message, public.zero)


def test_verify_with_other_key_fails(signed):
    _, message, signature = signed
    other = generate("[99;32]").public
    assert not verify(other, message, signature)


@pytest.mark.parametrize("position", [0, 1, 128, 255])
def test_single_tampered_block_fails(signed, position):
    public, message, signature = signed
    blocks = list(signature)
    blocks[position] = bytes([0x5A]) * BLOCK_SIZE

    assert not verify(public, message, Signature.from_blocks(blocks))


def test_flipped_bit_in_block_fails(signed):
    public, message, signature = signed
    blocks = list(signature)
    blocks[42] = bytes([blocks[42][0] ^ 0x01]) + blocks[42][1:]

    assert not verify(public, message, blocks)


def test_wrong_length_signature_returns_false(signed):
    public, message, signature = signed
    blocks = list(signature)

    assert not verify(public, message, blocks[:-1])
    assert not verify(public, message, blocks + [blocks[0]])
    assert not verify(public, message, [])


def test_wrong_width_block_returns_false(signed):
    public, message, signature = signed
    blocks = list(signature)
    blocks[0] = blocks[0] + b"\x00"

    assert not verify(public, message, blocks)


def test_mismatch_is_logged(signed, caplog):
    public, _, signature = signed
    with caplog.at_level("DEBUG", logger="lamport.verifier.verify"):
        assert not verify(public, "message", signature)
    assert "mismatch at position" in caplog.text


def test_verify_requires_public_key(signed):
    _, message, signature = signed
    with pytest.raises(TypeError):
        verify(signature, message, signature)


def test_cucumber_walkthrough():
    secret, public = generate("monte near beast")
    signature = sign(secret, "cucumber")

    assert len(signature) == 256
    assert verify(public, "cucumber", signature)
    assert not verify(public, "tomato", signature)
    assert not verify(public, "cucumber", public.zero)
