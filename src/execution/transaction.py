"""
Execution Layer - Transactions
Operations submitted to a smart account: validated once, executed once
"""
from typing import Dict, Any, List, Optional
from crypto.signature import SignedMessage
from crypto.keys import KeyPair

EIP_712_TX_TYPE = 0x71

class Transaction:
    """Represents a signed account operation"""
    
    def __init__(self, from_addr: str, to_addr: str, value: int, nonce: int, chain_id: str,
                 data: bytes = b"", gas_limit: int = 0, max_fee_per_gas: int = 0,
                 max_priority_fee_per_gas: int = 0, gas_per_pubdata_byte_limit: int = 0,
                 paymaster: Optional[str] = None, paymaster_input: bytes = b"",
                 factory_deps: List[str] = None, tx_type: int = EIP_712_TX_TYPE):
        self.tx_type = tx_type
        self.from_addr = from_addr
        self.to_addr = to_addr
        self.value = value
        self.nonce = nonce
        self.chain_id = chain_id
        self.data = data
        self.gas_limit = gas_limit
        self.max_fee_per_gas = max_fee_per_gas
        self.max_priority_fee_per_gas = max_priority_fee_per_gas
        self.gas_per_pubdata_byte_limit = gas_per_pubdata_byte_limit
        self.paymaster = paymaster
        self.paymaster_input = paymaster_input
        self.factory_deps = list(factory_deps or [])
        self.signature = b""
    
    def max_fee(self) -> int:
        """Largest fee this transaction is willing to pay"""
        return self.max_fee_per_gas * self.gas_limit
    
    def total_required_balance(self) -> int:
        return self.value + self.max_fee()
    
    def to_data_dict(self) -> Dict[str, Any]:
        """Signed fields of the transaction"""
        return {
            "type": self.tx_type,
            "from": self.from_addr,
            "to": self.to_addr,
            "gas_limit": self.gas_limit,
            "gas_per_pubdata_byte_limit": self.gas_per_pubdata_byte_limit,
            "max_fee_per_gas": self.max_fee_per_gas,
            "max_priority_fee_per_gas": self.max_priority_fee_per_gas,
            "paymaster": self.paymaster,
            "nonce": self.nonce,
            "value": self.value,
            "data": self.data.hex(),
            "factory_deps": self.factory_deps,
            "paymaster_input": self.paymaster_input.hex()
        }
    
    def _message(self) -> SignedMessage:
        return SignedMessage(
            domain=SignedMessage.DOMAIN_TX,
            chain_id=self.chain_id,
            data=self.to_data_dict()
        )
    
    def encode_hash(self) -> bytes:
        """Canonical digest; the signature is never part of it"""
        return self._message().digest()
    
    def signed_hash(self) -> bytes:
        """Digest after the signed-message prefix transform"""
        return self._message().signed_hash()
    
    @property
    def tx_hash(self) -> str:
        return self.encode_hash().hex()
    
    def sign(self, keypair: KeyPair):
        """Sign transaction with keypair"""
        msg = self._message()
        msg.sign(keypair)
        self.signature = msg.signature
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        d = self.to_data_dict()
        d["chain_id"] = self.chain_id
        d["signature"] = self.signature.hex()
        return d
    
    @classmethod
    def from_dict(cls, d: Dict[str, Any]):
        """Reconstruct from dictionary"""
        tx = cls(
            d["from"], d["to"], d["value"], d["nonce"], d["chain_id"],
            data=bytes.fromhex(d.get("data", "")),
            gas_limit=d.get("gas_limit", 0),
            max_fee_per_gas=d.get("max_fee_per_gas", 0),
            max_priority_fee_per_gas=d.get("max_priority_fee_per_gas", 0),
            gas_per_pubdata_byte_limit=d.get("gas_per_pubdata_byte_limit", 0),
            paymaster=d.get("paymaster"),
            paymaster_input=bytes.fromhex(d.get("paymaster_input", "")),
            factory_deps=d.get("factory_deps", []),
            tx_type=d.get("type", EIP_712_TX_TYPE)
        )
        if d.get("signature"):
            tx.signature = bytes.fromhex(d["signature"])
        return tx
