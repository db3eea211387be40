"""
AES helpers for provider secrets stored in configuration.

Stored values are base64(iv || ciphertext), AES-256-CBC with PKCS7 padding.
The AES key is the SHA-256 digest of SECRET_ENCRYPTION_KEY.
"""

import base64
import binascii
import hashlib

from Crypto.Cipher import AES
from Crypto.Random import get_random_bytes
from Crypto.Util.Padding import pad, unpad

from app.core.exceptions import SecretDecryptionError


def _derive_key(encryption_key: str) -> bytes:
    if not encryption_key:
        raise SecretDecryptionError("Secret encryption key not configured")
    return hashlib.sha256(encryption_key.encode("utf-8")).digest()


def encrypt_secret(value: str, encryption_key: str) -> str:
    if not value:
        return ""
    iv = get_random_bytes(AES.block_size)
    cipher = AES.new(_derive_key(encryption_key), AES.MODE_CBC, iv)
    encrypted = cipher.encrypt(pad(value.encode("utf-8"), AES.block_size))
    return base64.b64encode(iv + encrypted).decode("utf-8")


def decrypt_secret(value: str | None, encryption_key: str, field_name: str = "") -> str:
    """
    Decrypt a stored secret. Empty or missing values decrypt to ''.
    """
    if not value:
        return ""

    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise SecretDecryptionError(
            f"Stored value for '{field_name}' is not valid base64",
            details={"field": field_name},
        ) from e

    if len(raw) <= AES.block_size or len(raw) % AES.block_size:
        raise SecretDecryptionError(
            f"Stored value for '{field_name}' has an invalid length",
            details={"field": field_name},
        )

    iv, encrypted = raw[: AES.block_size], raw[AES.block_size :]
    cipher = AES.new(_derive_key(encryption_key), AES.MODE_CBC, iv)
    try:
        return unpad(cipher.decrypt(encrypted), AES.block_size).decode("utf-8")
    except (ValueError, UnicodeDecodeError) as e:
        raise SecretDecryptionError(
            f"Stored value for '{field_name}' could not be decrypted",
            details={"field": field_name},
        ) from e
