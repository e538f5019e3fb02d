from __future__ import annotations
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives import serialization
from rsaio.common.errors import KeyFormatError, PathArg


def assert_rsa_key(key, path: PathArg = None, kind=(rsa.RSAPublicKey, rsa.RSAPrivateKey)) -> None:
    if not isinstance(key, kind):
        raise KeyFormatError(f"expected an RSA key, got {type(key).__name__}", path)


# ---- Public key export/ import (DER SubjectPublicKeyInfo) ---- #
def encode_public_key(pk: rsa.RSAPublicKey) -> bytes:
    assert_rsa_key(pk, kind=rsa.RSAPublicKey)
    # return a byte string containing the public key in DER format
    return pk.public_bytes(encoding=serialization.Encoding.DER, format=serialization.PublicFormat.SubjectPublicKeyInfo,)


def decode_public_key(der: bytes, path: PathArg = None) -> rsa.RSAPublicKey:
    try:
        pk = serialization.load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise KeyFormatError("not a SubjectPublicKeyInfo structure", path) from exc
    assert_rsa_key(pk, path, kind=rsa.RSAPublicKey)
    # DER is canonical: anything else that parsed (PKCS#1 RSAPublicKey) re-encodes differently
    if encode_public_key(pk) != der:
        raise KeyFormatError("not a SubjectPublicKeyInfo structure", path)
    return pk


# ---- Private key export/ import (DER PKCS#8, unencrypted) ---- #
def encode_private_key(sk: rsa.RSAPrivateKey) -> bytes:
    assert_rsa_key(sk, kind=rsa.RSAPrivateKey)
    return sk.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


def decode_private_key(der: bytes, path: PathArg = None) -> rsa.RSAPrivateKey:
    try:
        sk = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        # TypeError: the blob is password protected
        raise KeyFormatError("not a PKCS#8 PrivateKeyInfo structure", path) from exc
    assert_rsa_key(sk, path, kind=rsa.RSAPrivateKey)
    # same check as above, rejects TraditionalOpenSSL (PKCS#1) DER
    if encode_private_key(sk) != der:
        raise KeyFormatError("not a PKCS#8 PrivateKeyInfo structure", path)
    return sk
