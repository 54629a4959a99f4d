import base58
import pytest
from cryptography.hazmat.primitives.asymmetric import ed25519
from chainkey_core import (
    AccountId, AccountCodec, BadAccountId, MalformedAccountId,
    WrongAccountIdLength, AccountIdChecksumMismatch,
)

ACCOUNT_HEX = "d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d"
ACCOUNT_ID = "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"


def make_account_id():
    return AccountId(bytes.fromhex(ACCOUNT_HEX))


def test_account_id_to_text():
    assert make_account_id().to_text() == ACCOUNT_ID
    assert str(make_account_id()) == ACCOUNT_ID


def test_text_to_account_id():
    assert AccountId.from_text(ACCOUNT_ID) == make_account_id()


@pytest.mark.parametrize("raw", [
    bytes(32),
    b"\xff" * 32,
    bytes(range(32)),
    bytes.fromhex(ACCOUNT_HEX),
])
def test_roundtrip(raw):
    acct = AccountId(raw)
    assert AccountId.from_text(acct.to_text()) == acct


def test_wrong_length_reports_observed_length():
    text = base58.b58encode(bytes(range(1, 35))).decode("ascii")
    with pytest.raises(WrongAccountIdLength) as ei:
        AccountId.from_text(text)
    assert ei.value.actual == 34
    assert ei.value.expected == 35
    assert str(ei.value) == "Invalid account ID (Expected 35 bytes in account ID but found 34)"


def test_empty_text_is_wrong_length():
    with pytest.raises(WrongAccountIdLength) as ei:
        AccountId.from_text("")
    assert "found 0" in str(ei.value)


@pytest.mark.parametrize("index,bit", [(1, 0), (8, 3), (16, 7), (32, 1)])
def test_flipped_id_bit_fails_checksum(index, bit):
    data = bytearray(base58.b58decode(ACCOUNT_ID))
    data[index] ^= 1 << bit
    tampered = base58.b58encode(bytes(data)).decode("ascii")

    with pytest.raises(AccountIdChecksumMismatch) as ei:
        AccountId.from_text(tampered)
    assert str(ei.value) == "Invalid account ID (Invalid hash in account ID)"


@pytest.mark.parametrize("bad", ["0", "O", "I", "l"])
def test_characters_outside_alphabet(bad):
    with pytest.raises(MalformedAccountId) as ei:
        AccountId.from_text(bad + ACCOUNT_ID[1:])
    assert str(ei.value).startswith("Invalid account ID (")
    assert isinstance(ei.value.__cause__, ValueError)


@pytest.mark.parametrize("suffix", [" ", "\n", "\t", "\r\n"])
def test_trailing_whitespace_is_malformed(suffix):
    with pytest.raises(MalformedAccountId) as ei:
        AccountId.from_text(ACCOUNT_ID + suffix)
    assert "Invalid character" in str(ei.value)


@pytest.mark.parametrize("text", [" ", "   ", "\n", " " + ACCOUNT_ID])
def test_whitespace_is_malformed(text):
    with pytest.raises(MalformedAccountId):
        AccountId.from_text(text)


def test_non_ascii_text_is_malformed():
    with pytest.raises(MalformedAccountId):
        AccountId.from_text("5Grwvá" + ACCOUNT_ID[6:])


def test_all_decode_errors_share_one_type():
    for text in ["0000", "", "5Grw"]:
        with pytest.raises(BadAccountId):
            AccountId.from_text(text)
    with pytest.raises(ValueError):
        AccountId.from_text("0000")


def test_prefix_is_not_validated_on_decode():
    acct = make_account_id()
    other = AccountCodec(prefix=0).encode(acct)
    assert other != ACCOUNT_ID
    assert acct.to_text(prefix=0) == other

    assert AccountId.from_text(other) == acct
    assert AccountCodec().decode_with_prefix(other) == (0, acct)
    assert AccountCodec().decode_with_prefix(ACCOUNT_ID) == (42, acct)


def test_codec_rejects_prefix_outside_a_byte():
    with pytest.raises(ValueError):
        AccountCodec(prefix=256)
    with pytest.raises(ValueError):
        AccountCodec(prefix=-1)


def test_account_id_requires_32_bytes():
    with pytest.raises(ValueError):
        AccountId(bytes(31))
    with pytest.raises(ValueError):
        AccountId(bytes(33))


def test_account_id_rejects_non_bytes():
    with pytest.raises(TypeError):
        AccountId(32)
    with pytest.raises(TypeError):
        AccountId("d43593c715fdd31c61141abd04a99fd6822c8558854ccde3")
    assert AccountId(memoryview(bytes(32))) == AccountId(bytes(32))


def test_account_id_value_semantics():
    a = AccountId(bytes(32))
    b = AccountId(b"\x01" + bytes(31))
    assert a < b
    assert sorted([b, a]) == [a, b]
    assert len({a, AccountId(bytearray(32)), b}) == 2
    with pytest.raises(AttributeError):
        a.raw = b"\x02" * 32


def test_hex_and_bytes_forms():
    acct = AccountId.from_hex("0x" + ACCOUNT_HEX)
    assert acct == AccountId.from_hex(ACCOUNT_HEX.upper())
    assert acct.to_hex() == "0x" + ACCOUNT_HEX
    assert bytes(acct) == acct.to_bytes() == bytes.fromhex(ACCOUNT_HEX)
    assert AccountId.from_bytes(acct.to_bytes()) == acct


def test_from_ed25519_public_key():
    pk = ed25519.Ed25519PrivateKey.generate().public_key()
    acct = AccountId.from_public_key(pk)
    assert acct.raw == pk.public_bytes_raw()
    assert AccountId.from_text(acct.to_text()) == acct
