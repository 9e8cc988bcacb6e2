import pytest

from bscnode.precompile import PrecompileError, PrecompileOutOfGas
from bscnode.tm_secp256k1 import tm_secp256k1_signature_recover_run

N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

LOCAL_KEY = bytes.fromhex("0278caa4d6321aa856d6341dd3e8bcdfe0b55901548871c63c3f5cec43c2ae88a9")
LOCAL_SIG = bytes.fromhex(
    "0cb78be0d8eaeab991907b06c61240c04f4ca83f54b7799ce77cf029b8379880"
    "38c4b3b7f5df231695b0d14499b716e1fd6504860eb3c9244ecb4e569d44c062"
)
LOCAL_MSG = bytes.fromhex("b6ac827edff4bbbf23579720782dbef40b65780af292cc66849e7e5944f1230f")

LEDGER_KEY = bytes.fromhex("02d63ee39adb1779353b4393dd5ea9d6d2b6df63b71d168571803cc7b9a0a20e98")
LEDGER_SIG = bytes.fromhex(
    "66bdb5d381b2773c0f569858c7ee143959522d7c1f46dc656c325cb7353ec40c"
    "28ec22dff3650b34c096c5b12e702d7237d409f1ebaaa6dd1128a8f2d401fd5b"
)
LEDGER_MSG = bytes.fromhex("c45e8f0dc7c054c31912beeffd6f10f1c585606d61e252e97968cd66661c2571")


def test_recover_local_key():
    res = tm_secp256k1_signature_recover_run(LOCAL_KEY + LOCAL_SIG + LOCAL_MSG, 3_000)
    assert res.gas_used == 3_000
    assert len(res.data) == 20
    assert res.data.hex().startswith("fa3b227adff8ea")
    assert res.data.hex().endswith("d76959ae6c")


def test_recover_ledger_key():
    res = tm_secp256k1_signature_recover_run(LEDGER_KEY + LEDGER_SIG + LEDGER_MSG, 3_000)
    assert res.gas_used == 3_000
    assert res.data == bytes.fromhex("65a284146b84210a01add088954bb52d88b230af")


def test_out_of_gas():
    with pytest.raises(PrecompileOutOfGas):
        tm_secp256k1_signature_recover_run(LEDGER_KEY + LEDGER_SIG + LEDGER_MSG, 2_999)


def test_wrong_length_is_invalid_input():
    with pytest.raises(PrecompileError) as excinfo:
        tm_secp256k1_signature_recover_run(LEDGER_KEY + LEDGER_SIG, 3_000)
    assert excinfo.value == PrecompileError("invalid input")


def test_bad_pubkey_prefix():
    bad_key = b"\x05" + LEDGER_KEY[1:]
    with pytest.raises(PrecompileError) as excinfo:
        tm_secp256k1_signature_recover_run(bad_key + LEDGER_SIG + LEDGER_MSG, 3_000)
    assert excinfo.value == PrecompileError("invalid pubkey")


def test_wrong_message_is_invalid_signature():
    wrong_msg = b"\x00" + LEDGER_MSG[1:]
    with pytest.raises(PrecompileError) as excinfo:
        tm_secp256k1_signature_recover_run(LEDGER_KEY + LEDGER_SIG + wrong_msg, 3_000)
    assert excinfo.value == PrecompileError("invalid signature")


def test_high_s_signature_is_rejected():
    r = LEDGER_SIG[:32]
    s = int.from_bytes(LEDGER_SIG[32:], "big")
    high_sig = r + (N - s).to_bytes(32, "big")
    with pytest.raises(PrecompileError) as excinfo:
        tm_secp256k1_signature_recover_run(LEDGER_KEY + high_sig + LEDGER_MSG, 3_000)
    assert excinfo.value == PrecompileError("invalid signature")


def test_overflowing_r_is_rejected():
    overflow_sig = b"\xff" * 32 + LEDGER_SIG[32:]
    with pytest.raises(PrecompileError) as excinfo:
        tm_secp256k1_signature_recover_run(LEDGER_KEY + overflow_sig + LEDGER_MSG, 3_000)
    assert excinfo.value == PrecompileError("invalid signature")


def test_different_keys_give_different_ids():
    local = tm_secp256k1_signature_recover_run(LOCAL_KEY + LOCAL_SIG + LOCAL_MSG, 10_000)
    ledger = tm_secp256k1_signature_recover_run(LEDGER_KEY + LEDGER_SIG + LEDGER_MSG, 10_000)
    assert local.data != ledger.data
    assert local.gas_used == ledger.gas_used == 3_000