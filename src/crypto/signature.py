"""
Cryptography Layer - Message Signing with Domain Separation
Signature blobs carry the signer's public key so the signer identity can be
recovered from (digest, signature) alone.

Blob layout: bytes 0-31 public key, bytes 32-95 Ed25519 signature.
"""
from typing import Dict, Any, Optional
from .keys import KeyPair, PUBLIC_KEY_SIZE, SIGNATURE_SIZE, address_from_public_key
from .hashing import canonical_json, hash_data, to_signed_message_hash

SIGNATURE_BLOB_SIZE = PUBLIC_KEY_SIZE + SIGNATURE_SIZE

def sign_digest(keypair: KeyPair, digest: bytes) -> bytes:
    """Sign a digest and return the recoverable signature blob"""
    return keypair.get_public_key_bytes() + keypair.sign(digest)

def recover_signer(digest: bytes, signature: bytes) -> Optional[str]:
    """
    Recover the signer address from a digest and a signature blob.
    Returns None when the blob is malformed or does not verify.
    """
    if signature is None or len(signature) != SIGNATURE_BLOB_SIZE:
        return None
    public_key_bytes = signature[:PUBLIC_KEY_SIZE]
    raw_signature = signature[PUBLIC_KEY_SIZE:]
    if not KeyPair.verify(public_key_bytes, raw_signature, digest):
        return None
    return address_from_public_key(public_key_bytes)

class SignedMessage:
    """Domain-separated message whose digest is signed with the message prefix"""
    
    DOMAIN_TX = "TX"
    DOMAIN_MESSAGE = "MESSAGE"
    
    def __init__(self, domain: str, chain_id: str, data: Dict[str, Any]):
        self.domain = domain
        self.chain_id = chain_id
        self.data = data
        self.signature = None
        self.signer_address = None
    
    def get_signing_bytes(self) -> bytes:
        """Get deterministic bytes for hashing with domain separation"""
        return canonical_json({
            "domain": self.domain,
            "chain_id": self.chain_id,
            "data": self.data
        })
    
    def digest(self) -> bytes:
        """Canonical 32-byte digest of the message"""
        return hash_data(self.get_signing_bytes())
    
    def signed_hash(self) -> bytes:
        """Digest after the signed-message prefix transform"""
        return to_signed_message_hash(self.digest())
    
    def sign(self, keypair: KeyPair):
        """Sign the message with given keypair"""
        self.signature = sign_digest(keypair, self.signed_hash())
        self.signer_address = keypair.get_address()
    
    def recover(self) -> Optional[str]:
        """Recover the address that signed this message, if any"""
        return recover_signer(self.signed_hash(), self.signature)
