from ltibridge.crypto.launch_code import check_launch_code, get_launch_code, get_launch_code_key
from ltibridge.crypto.secrets import (
    CIPHER_SPEC,
    SecretCipher,
    decrypt_secret,
    encrypt_secret,
    is_encrypted,
)

__all__ = [
    "CIPHER_SPEC",
    "SecretCipher",
    "check_launch_code",
    "decrypt_secret",
    "encrypt_secret",
    "get_launch_code",
    "get_launch_code_key",
    "is_encrypted",
]
