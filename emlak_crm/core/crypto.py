"""
Field-level encryption for TC Kimlik No and IBAN values.

Values are stored as "iv:ciphertext" (both hex) using AES-256-GCM.
TC numbers are additionally hashed with SHA-256 so records can be
matched without decrypting.
"""

import hashlib
import os
import re

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from emlak_crm.config import settings
from emlak_crm.core.exceptions import ValidationException

IV_LENGTH = 12  # 96 bits for GCM

_TC_PATTERN = re.compile(r"^\d{11}$")
_IBAN_PATTERN = re.compile(r"^TR\d{24}$")


class FieldCipher:
    """AES-256-GCM cipher for short sensitive strings"""

    def __init__(self, key_hex: str):
        if len(key_hex) != 64:
            raise ValueError("Encryption key must be 32 bytes (64 hex characters)")
        self._aesgcm = AESGCM(bytes.fromhex(key_hex))

    def encrypt(self, plaintext: str) -> str:
        iv = os.urandom(IV_LENGTH)
        ciphertext = self._aesgcm.encrypt(iv, plaintext.encode("utf-8"), None)
        return f"{iv.hex()}:{ciphertext.hex()}"

    def decrypt(self, value: str) -> str:
        iv_hex, _, ciphertext_hex = value.partition(":")
        if not iv_hex or not ciphertext_hex:
            raise ValidationException('Invalid ciphertext format. Expected "iv:ciphertext"')

        try:
            plaintext = self._aesgcm.decrypt(bytes.fromhex(iv_hex), bytes.fromhex(ciphertext_hex), None)
        except (InvalidTag, ValueError) as e:
            raise ValidationException("Failed to decrypt data") from e
        return plaintext.decode("utf-8")


def get_cipher() -> FieldCipher:
    """FastAPI dependency returning the cipher configured from ENCRYPTION_KEY."""
    return FieldCipher(settings.ENCRYPTION_KEY)


def hash_tc(tc: str) -> str:
    """SHA-256 hex digest of a TC Kimlik No. Same input always gives the same hash."""
    return hashlib.sha256(tc.encode("utf-8")).hexdigest()


def is_valid_tc(tc: str) -> bool:
    """TC Kimlik No must be exactly 11 digits"""
    return bool(_TC_PATTERN.match(tc))


def is_valid_iban(iban: str) -> bool:
    """Turkish IBAN: TR followed by 24 digits"""
    return bool(_IBAN_PATTERN.match(iban))


def generate_encryption_key() -> str:
    """Return a fresh 32-byte key as 64 hex characters (for ENCRYPTION_KEY)."""
    return os.urandom(32).hex()
