"""Encryption of tool secrets at rest.

Stored form is four colon-separated fields::

    <iv hex>:<ciphertext hex>:<tag hex>:AES/CBC/PKCS5Padding

AES-256-CBC with PKCS#7 padding; the tag is a truncated HMAC-SHA256 over
iv + ciphertext.  Cipher and MAC keys are derived from the configured key
string with HKDF.  Values not in this form are treated as legacy plaintext.
"""

from __future__ import annotations

import logging
import os

from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives import hmac as crypto_hmac
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.constant_time import bytes_eq
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from ltibridge.config import Settings, settings as default_settings
from ltibridge.exceptions import CryptoError

logger = logging.getLogger("ltibridge.crypto.secrets")

CIPHER_SPEC = "AES/CBC/PKCS5Padding"
_IV_BYTES = 16
_TAG_BYTES = 16
_HKDF_INFO = b"ltibridge secret v1"


def _derive_keys(key: str | None) -> tuple[bytes, bytes]:
    if not key:
        raise CryptoError("An encryption key is required")
    material = HKDF(
        algorithm=hashes.SHA256(),
        length=64,
        salt=None,
        info=_HKDF_INFO,
    ).derive(key.encode("utf-8"))
    return material[:32], material[32:]


def _tag(mac_key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    h = crypto_hmac.HMAC(mac_key, hashes.SHA256())
    h.update(iv + ciphertext)
    return h.finalize()[:_TAG_BYTES]


def _split(value: str) -> tuple[bytes, bytes, bytes] | None:
    pieces = value.split(":")
    if len(pieces) != 4 or pieces[3] != CIPHER_SPEC:
        return None
    try:
        iv, ciphertext, tag = (bytes.fromhex(p) for p in pieces[:3])
    except ValueError:
        return None
    if len(iv) != _IV_BYTES or len(tag) != _TAG_BYTES or not ciphertext:
        return None
    return iv, ciphertext, tag


def is_encrypted(value: str | None) -> bool:
    """Return True if ``value`` has the shape of an encrypted secret."""
    return bool(value) and _split(value) is not None


def encrypt_secret(plain: str | None, key: str | None) -> str | None:
    """Encrypt ``plain`` under ``key``.

    A value that already decrypts under ``key`` is returned unchanged, so
    encrypting twice never wraps a secret in two layers.  Blank input is
    returned as-is.
    """
    if plain is None or not plain.strip():
        return plain
    enc_key, mac_key = _derive_keys(key)
    if is_encrypted(plain) and decrypt_secret(plain, key) is not None:
        return plain

    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    data = padder.update(plain.encode("utf-8")) + padder.finalize()
    iv = os.urandom(_IV_BYTES)
    encryptor = Cipher(algorithms.AES(enc_key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(data) + encryptor.finalize()
    tag = _tag(mac_key, iv, ciphertext)
    return ":".join((iv.hex(), ciphertext.hex(), tag.hex(), CIPHER_SPEC))


def decrypt_secret(value: str | None, key: str | None) -> str | None:
    """Decrypt a stored secret.

    Values that are not encrypted come back unchanged.  A ciphertext that
    fails its integrity check or padding (wrong key, tampering) yields
    ``None``; this never raises for bad ciphertext.
    """
    parts = _split(value) if value else None
    if parts is None:
        return value
    enc_key, mac_key = _derive_keys(key)
    iv, ciphertext, tag = parts

    if not bytes_eq(_tag(mac_key, iv, ciphertext), tag):
        logger.warning("Secret failed integrity check, wrong key or altered value")
        return None
    try:
        decryptor = Cipher(algorithms.AES(enc_key), modes.CBC(iv)).decryptor()
        data = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        return (unpadder.update(data) + unpadder.finalize()).decode("utf-8")
    except ValueError:
        logger.warning("Secret could not be decrypted")
        return None


class SecretCipher:
    """Encrypts and decrypts tool secrets with the configured key.

    The key comes from ``Settings.encryption_key``; calls that need it raise
    ``CryptoError`` when it is not set.
    """

    def __init__(self, config: Settings | None = None) -> None:
        self.key = (config or default_settings).encryption_key

    def encrypt(self, plain: str | None) -> str | None:
        return encrypt_secret(plain, self.key)

    def decrypt(self, value: str | None) -> str | None:
        return decrypt_secret(value, self.key)
