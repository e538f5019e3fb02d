# Save/ load an RSA key pair as base64 SPKI (public.key) and PKCS#8 (private.key) DER.
# The two writes of a save are not atomic: public.key first, then private.key.
from __future__ import annotations
import logging
import os
from typing import NamedTuple
from cryptography.hazmat.primitives.asymmetric import rsa
from rsaio.common.b64 import b64, ub64
from rsaio.common.errors import KeyFileIOError, KeyFileNotFound, PathLike
from rsaio.store.crypto_km import (
    encode_public_key, decode_public_key, encode_private_key, decode_private_key)

logger = logging.getLogger(__name__)

PUBLIC_KEY_FILE = "public.key"
PRIVATE_KEY_FILE = "private.key"
READ_CHUNK_SIZE = 16384


class KeyPair(NamedTuple):
    public: rsa.RSAPublicKey
    private: rsa.RSAPrivateKey

    @classmethod
    def from_private(cls, sk: rsa.RSAPrivateKey) -> "KeyPair":
        return cls(sk.public_key(), sk)


# ---- File helpers ---- #
def _write_key_file(path: str, der: bytes) -> None:
    try:
        with open(path, "wb") as f:
            f.write(b64(der).encode("ascii"))
    except OSError as exc:
        raise KeyFileIOError(f"cannot write key file: {exc.strerror or exc}", path) from exc
    logger.debug("wrote %s (%d DER bytes)", path, len(der))


def _read_key_file(path: str) -> bytes:
    buf = bytearray()
    try:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(READ_CHUNK_SIZE)
                if not chunk:
                    break
                buf += chunk
    except FileNotFoundError as exc:
        raise KeyFileNotFound("key file missing", path) from exc
    except OSError as exc:
        raise KeyFileIOError(f"cannot read key file: {exc.strerror or exc}", path) from exc
    logger.debug("read %s (%d bytes)", path, len(buf))
    return bytes(buf)


# ---- Save/ Load ---- #
def save(directory: PathLike, key_pair: KeyPair) -> None:
    # directory must already exist; both keys are exported before either file is touched
    public, private = key_pair
    pub_der = encode_public_key(public)
    priv_der = encode_private_key(private)

    _write_key_file(os.path.join(directory, PUBLIC_KEY_FILE), pub_der)
    _write_key_file(os.path.join(directory, PRIVATE_KEY_FILE), priv_der)


def load(directory: PathLike) -> KeyPair:
    pub_path = os.path.join(directory, PUBLIC_KEY_FILE)
    priv_path = os.path.join(directory, PRIVATE_KEY_FILE)

    encoded_public = _read_key_file(pub_path)
    encoded_private = _read_key_file(priv_path)

    # both must parse before anything is returned
    public = decode_public_key(ub64(encoded_public, pub_path), pub_path)
    private = decode_private_key(ub64(encoded_private, priv_path), priv_path)
    return KeyPair(public, private)


def load_public(directory: PathLike) -> rsa.RSAPublicKey:
    pub_path = os.path.join(directory, PUBLIC_KEY_FILE)
    return decode_public_key(ub64(_read_key_file(pub_path), pub_path), pub_path)


def exists(directory: PathLike) -> bool:
    # both files present; says nothing about their content
    return all(os.path.isfile(os.path.join(directory, name)) for name in (PUBLIC_KEY_FILE, PRIVATE_KEY_FILE))
