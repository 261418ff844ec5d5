"""
Cryptography Layer - Hashing and Commitments
Collision-resistant hash function for transaction digests and state commitments
"""
import hashlib
import json
from typing import Any, Dict

# Prefix applied to a 32-byte digest before an owner signs it
SIGNED_MESSAGE_PREFIX = b"\x19Ethereum Signed Message:\n32"

def hash_data(data: bytes) -> bytes:
    """Hash arbitrary bytes using SHA-256"""
    return hashlib.sha256(data).digest()

def canonical_json(data: Dict[str, Any]) -> bytes:
    """Deterministic JSON encoding (sorted keys, no whitespace)"""
    return json.dumps(data, sort_keys=True, separators=(',', ':')).encode('utf-8')

def hash_hex(data: bytes) -> str:
    """Return hex representation of hash"""
    return hashlib.sha256(data).hexdigest()

def hash_dict_hex(data: Dict[str, Any]) -> str:
    """Return hex hash of dictionary"""
    return hash_hex(canonical_json(data))

def to_signed_message_hash(digest: bytes) -> bytes:
    """Apply the signed-message prefix transform to a 32-byte digest"""
    if len(digest) != 32:
        raise ValueError(f"Digest must be 32 bytes, got {len(digest)}")
    return hash_data(SIGNED_MESSAGE_PREFIX + digest)
