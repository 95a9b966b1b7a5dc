"""Tests for secret encryption and launch codes."""

from __future__ import annotations

import pytest

from ltibridge.config import Settings
from ltibridge.crypto.launch_code import check_launch_code, get_launch_code, get_launch_code_key
from ltibridge.crypto.secrets import (
    CIPHER_SPEC,
    SecretCipher,
    decrypt_secret,
    encrypt_secret,
    is_encrypted,
)
from ltibridge.exceptions import CryptoError
from ltibridge.fields import LTI_ID, LTI_PLACEMENTSECRET


def good_encrypt(enc: str) -> bool:
    pieces = enc.split(":")
    return len(pieces) == 4 and pieces[3] == "AES/CBC/PKCS5Padding"


# ---------------------------------------------------------------------------
# Secret encryption
# ---------------------------------------------------------------------------


class TestEncryptSecret:
    def test_encrypt_then_decrypt(self):
        encrypted = encrypt_secret("plain", "bob")
        assert encrypted != "plain"
        assert good_encrypt(encrypted)
        assert decrypt_secret(encrypted, "bob") == "plain"

    def test_no_double_encrypt(self):
        encrypt1 = encrypt_secret("plain", "bob")
        encrypt2 = encrypt_secret(encrypt1, "bob")
        assert good_encrypt(encrypt2)
        assert encrypt1 == encrypt2
        assert decrypt_secret(encrypt2, "bob") == "plain"

    def test_each_encryption_is_distinct(self):
        assert encrypt_secret("plain", "bob") != encrypt_secret("plain", "bob")

    def test_ciphertext_under_another_key_is_wrapped(self):
        foreign = encrypt_secret("plain", "alice")
        wrapped = encrypt_secret(foreign, "bob")
        assert wrapped != foreign
        assert decrypt_secret(wrapped, "bob") == foreign

    def test_unicode_round_trip(self):
        secret = "sécrèt ✓"
        assert decrypt_secret(encrypt_secret(secret, "k"), "k") == secret

    @pytest.mark.parametrize("blank", [None, "", "  "])
    def test_blank_passes_through(self, blank):
        assert encrypt_secret(blank, "bob") == blank

    def test_missing_key_raises(self):
        with pytest.raises(CryptoError):
            encrypt_secret("plain", "")


class TestDecryptSecret:
    def test_wrong_key_returns_none(self):
        assert decrypt_secret(encrypt_secret("plain", "bob"), "alice") is None

    def test_tampered_ciphertext_returns_none(self):
        iv, ciphertext, tag, spec = encrypt_secret("plain", "bob").split(":")
        flipped = ("0" if ciphertext[0] != "0" else "1") + ciphertext[1:]
        assert decrypt_secret(":".join((iv, flipped, tag, spec)), "bob") is None

    def test_plaintext_is_returned_unchanged(self):
        assert decrypt_secret("legacy-secret", "bob") == "legacy-secret"
        assert decrypt_secret(None, "bob") is None

    def test_is_encrypted(self):
        assert is_encrypted(encrypt_secret("plain", "bob"))
        assert not is_encrypted("plain")
        assert not is_encrypted(None)
        assert not is_encrypted(f"zz:yy:xx:{CIPHER_SPEC}")
        assert not is_encrypted("4bd442a8:2803e729:790b8098:AES/GCM/NoPadding")


class TestSecretCipher:
    def test_uses_configured_key(self):
        cipher = SecretCipher(Settings(encryption_key="bob"))
        stored = cipher.encrypt("tool-secret")
        assert stored != "tool-secret"
        assert decrypt_secret(stored, "bob") == "tool-secret"
        assert cipher.decrypt(stored) == "tool-secret"

    def test_unset_key_raises(self, monkeypatch):
        monkeypatch.delenv("LTI_ENCRYPTION_KEY", raising=False)
        cipher = SecretCipher(Settings())
        with pytest.raises(CryptoError):
            cipher.encrypt("tool-secret")
        # Stored plaintext needs no key
        assert cipher.decrypt("tool-secret") == "tool-secret"


# ---------------------------------------------------------------------------
# Launch codes
# ---------------------------------------------------------------------------


class TestLaunchCodes:
    def test_launch_code_round_trip(self):
        content = {LTI_ID: "42", LTI_PLACEMENTSECRET: "xyzzy"}
        assert get_launch_code_key(content) == "launch_code:42"

        launch_code = get_launch_code(content)
        assert check_launch_code(content, launch_code)

        content[LTI_PLACEMENTSECRET] = "wrong"
        assert not check_launch_code(content, launch_code)

        # Correct secret, different id
        content[LTI_ID] = "43"
        content[LTI_PLACEMENTSECRET] = "xyzzy"
        assert not check_launch_code(content, launch_code)

    def test_missing_secret_never_verifies(self):
        content = {LTI_ID: "42"}
        assert get_launch_code(content) is None
        assert not check_launch_code(content, "anything")

    def test_garbage_code_is_rejected(self):
        content = {LTI_ID: 42, LTI_PLACEMENTSECRET: "xyzzy"}
        assert not check_launch_code(content, None)
        assert not check_launch_code(content, "")
        assert not check_launch_code(content, "über")
