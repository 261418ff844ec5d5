"""
Execution Layer - State Management
Models state as key-value records (balances, deployed code)
"""
from typing import Dict, Any, List, Optional
import copy
from crypto.hashing import hash_dict_hex

class State:
    """Ledger of native-asset balances and deployed code, as a key-value store"""
    
    def __init__(self, initial_state: Dict[str, Any] = None):
        if initial_state is None:
            self.data = {}
        else:
            self.data = copy.deepcopy(initial_state)
    
    def get_balance(self, address: str) -> int:
        """Get balance for address"""
        return self.data.get(f"balance:{address}", 0)
    
    def set_balance(self, address: str, amount: int):
        """Set balance for address"""
        if amount < 0:
            raise ValueError(f"Negative balance for {address}: {amount}")
        self.data[f"balance:{address}"] = amount
    
    def transfer(self, from_addr: str, to_addr: str, amount: int) -> bool:
        """Transfer tokens between addresses"""
        if amount < 0:
            return False
        from_balance = self.get_balance(from_addr)
        if from_balance < amount:
            return False
        
        self.set_balance(from_addr, from_balance - amount)
        to_balance = self.get_balance(to_addr)
        self.set_balance(to_addr, to_balance + amount)
        return True
    
    def get_code(self, address: str) -> Optional[str]:
        """Bytecode hash deployed at address, if any"""
        return self.data.get(f"code:{address}")
    
    def set_code(self, address: str, bytecode_hash: str):
        self.data[f"code:{address}"] = bytecode_hash
    
    def code_addresses(self) -> List[str]:
        """Addresses that currently hold deployed code, sorted"""
        return sorted(k[len("code:"):] for k in self.data if k.startswith("code:"))
    
    def get_hash(self) -> str:
        """Get deterministic hash of state"""
        return hash_dict_hex(self.data)
    
    def copy(self):
        """Create deep copy of state"""
        return State(self.data)
    
    def restore(self, snapshot: 'State'):
        """Replace contents in place with those of a snapshot"""
        self.data = copy.deepcopy(snapshot.data)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return copy.deepcopy(self.data)
