"""
Account Core - Validation Engine
Decides whether an operation may be admitted: nonce, solvency, signature
"""
from enum import Enum
from crypto.signature import recover_signer
from execution.errors import Insolvent
from execution.transaction import Transaction
from .constants import ACCOUNT_VALIDATION_SUCCESS_MAGIC, NOT_MAGIC

class ValidationResult(Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    
    def to_magic(self) -> bytes:
        if self is ValidationResult.ACCEPTED:
            return ACCOUNT_VALIDATION_SUCCESS_MAGIC
        return NOT_MAGIC
    
    @classmethod
    def from_magic(cls, value: bytes) -> 'ValidationResult':
        if value == ACCOUNT_VALIDATION_SUCCESS_MAGIC:
            return cls.ACCEPTED
        return cls.REJECTED

class ValidationEngine:
    """Validation phase of the account protocol"""
    
    def __init__(self, account_address: str, owner: str, environment, logger):
        self.account_address = account_address
        self.owner = owner
        self.environment = environment
        self.logger = logger
    
    def validate(self, tx: Transaction) -> ValidationResult:
        """
        Steps run in order and each fatal failure stops the rest:
        1. Advance the nonce (raises ReplayOrOutOfOrder). This commits in the
           nonce holder immediately and is NOT undone by any later abort,
           so the same nonce can never be probed twice.
        2. Solvency (raises Insolvent) before any funds move.
        3. Signature. A mismatch is a soft REJECTED, not an abort.
        """
        self.environment.nonce_holder.increment_min_nonce_if_equals(
            self.account_address, tx.nonce)
        
        required = tx.total_required_balance()
        available = self.environment.get_balance(self.account_address)
        if required > available:
            self.logger.log("VALIDATE", f"Insolvent: has {available}, needs {required}")
            raise Insolvent(f"Not enough balance for fee + value. Has {available}, needs {required}")
        
        signer = recover_signer(tx.signed_hash(), tx.signature)
        if signer is None or signer != self.owner:
            self.logger.log("VALIDATE", f"Rejected tx {tx.tx_hash[:16]}...: signer is not the owner")
            return ValidationResult.REJECTED
        
        self.logger.log("VALIDATE", f"Accepted tx {tx.tx_hash[:16]}... nonce {tx.nonce}")
        return ValidationResult.ACCEPTED
