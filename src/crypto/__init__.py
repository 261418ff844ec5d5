"""Crypto layer initialization"""
from .keys import KeyPair
from .signature import SignedMessage, sign_digest, recover_signer
from .hashing import hash_data, hash_hex, hash_dict_hex, to_signed_message_hash

__all__ = ['KeyPair', 'SignedMessage', 'sign_digest', 'recover_signer',
           'hash_data', 'hash_hex', 'hash_dict_hex', 'to_signed_message_hash']
