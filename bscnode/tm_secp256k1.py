"""Tendermint secp256k1 signature check that returns the signer's account id."""

from __future__ import annotations

import hashlib

from Crypto.Hash import RIPEMD160
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    Prehashed,
    encode_dss_signature,
)

from bscnode.precompile import PrecompileError, PrecompileOutOfGas, PrecompileOutput

TM_SECP256K1_SIGNATURE_RECOVER_ADDRESS = (105).to_bytes(20, "big")
TM_SECP256K1_SIGNATURE_RECOVER_BASE = 3_000

SECP256K1_PUBKEY_LENGTH = 33
SECP256K1_SIGNATURE_LENGTH = 64
SECP256K1_SIGNATURE_MSGHASH_LENGTH = 32

_CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def _account_id(compressed_key: bytes) -> bytes:
    digest = hashlib.sha256(compressed_key).digest()
    return RIPEMD160.new(digest).digest()


def tm_secp256k1_signature_recover_run(input: bytes, gas_limit: int) -> PrecompileOutput:
    """Verify a signature and return the Tendermint account id of its key.

    The input is a 33-byte compressed public key, a 64-byte compact signature
    and the 32-byte message hash that was signed.
    """
    if TM_SECP256K1_SIGNATURE_RECOVER_BASE > gas_limit:
        raise PrecompileOutOfGas()

    data = bytes(input)
    sig_start = SECP256K1_PUBKEY_LENGTH
    msg_start = sig_start + SECP256K1_SIGNATURE_LENGTH
    if len(data) != msg_start + SECP256K1_SIGNATURE_MSGHASH_LENGTH:
        raise PrecompileError("invalid input")

    key_bytes = data[:sig_start]
    signature = data[sig_start:msg_start]
    message = data[msg_start:]

    if key_bytes[0] not in (0x02, 0x03):
        raise PrecompileError("invalid pubkey")
    try:
        public_key = ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), key_bytes)
    except ValueError:
        raise PrecompileError("invalid pubkey") from None

    r = int.from_bytes(signature[:32], "big")
    s = int.from_bytes(signature[32:], "big")
    if r >= _CURVE_ORDER or s >= _CURVE_ORDER:
        raise PrecompileError("invalid signature")
    # Only non-zero, low-S signatures verify.
    if r == 0 or s == 0 or s > _CURVE_ORDER // 2:
        raise PrecompileError("invalid signature")

    try:
        public_key.verify(
            encode_dss_signature(r, s),
            message,
            ec.ECDSA(Prehashed(hashes.SHA256())),
        )
    except InvalidSignature:
        raise PrecompileError("invalid signature") from None

    return PrecompileOutput(
        gas_used=TM_SECP256K1_SIGNATURE_RECOVER_BASE,
        data=_account_id(key_bytes),
    )