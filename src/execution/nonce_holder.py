"""
Execution Layer - Nonce Holder
Process-wide ledger of the minimum acceptable nonce per account.

Writes here commit immediately. The holder is deliberately kept outside of
Environment snapshots, so a nonce advanced by a validation that later aborts
stays advanced.
"""
from typing import Dict
from .errors import ReplayOrOutOfOrder

class NonceHolder:
    """Maps account address -> minimum acceptable nonce"""
    
    def __init__(self, logger):
        self.logger = logger
        self.min_nonces: Dict[str, int] = {}
    
    def get_min_nonce(self, address: str) -> int:
        return self.min_nonces.get(address, 0)
    
    def increment_min_nonce_if_equals(self, address: str, expected_nonce: int):
        """Advance the nonce by one iff it currently equals expected_nonce"""
        current = self.get_min_nonce(address)
        if current != expected_nonce:
            self.logger.log("NONCE",
                            f"Rejected nonce {expected_nonce} for {address[:10]}..., "
                            f"expected {current}")
            raise ReplayOrOutOfOrder(
                f"Incorrect nonce. Expected {current}, got {expected_nonce}")
        
        self.min_nonces[address] = current + 1
        self.logger.log("NONCE", f"Advanced nonce of {address[:10]}... to {current + 1}")
    
    def increase_min_nonce(self, address: str, value: int) -> int:
        """Skip ahead by value; returns the previous minimum nonce"""
        if value < 0:
            raise ValueError("Nonce can only be increased")
        previous = self.get_min_nonce(address)
        self.min_nonces[address] = previous + value
        return previous
    
    def to_dict(self) -> Dict[str, int]:
        return dict(self.min_nonces)
