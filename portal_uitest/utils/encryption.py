# utils/encryption.py
import os
from typing import Optional

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from portal_uitest.core.errors import ConfigError

# Zero IV: equal plaintexts always encrypt to equal ciphertexts.
_IV = bytes(16)


def _key(key: Optional[str] = None) -> bytes:
    raw = (key if key is not None else os.getenv('ENCRYPTION_KEY', '')).encode('utf-8')
    if len(raw) != 16:
        raise ConfigError('ENCRYPTION_KEY must be exactly 16 bytes for AES-128')
    return raw


def encrypt(text: str, key: Optional[str] = None) -> str:
    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    data = padder.update(text.encode('utf-8')) + padder.finalize()
    encryptor = Cipher(algorithms.AES(_key(key)), modes.CBC(_IV)).encryptor()
    return (encryptor.update(data) + encryptor.finalize()).hex()


def decrypt(encrypted_text: str, key: Optional[str] = None) -> str:
    decryptor = Cipher(algorithms.AES(_key(key)), modes.CBC(_IV)).decryptor()
    data = decryptor.update(bytes.fromhex(encrypted_text)) + decryptor.finalize()
    unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
    return (unpadder.update(data) + unpadder.finalize()).decode('utf-8')
