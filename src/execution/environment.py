"""
Execution Layer - Simulated Execution Environment
Routes value transfers and calls between addresses, hosts system contracts
and provides snapshot-based atomicity for ledger state.
"""
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
from .state import State
from .nonce_holder import NonceHolder
from .addresses import is_system_contract
from .errors import AbortError, Insolvent, SystemCallFailed

@dataclass
class CallFrame:
    """A single call between two addresses"""
    sender: str
    target: str
    value: int
    data: bytes
    gas: int
    is_system: bool = False

# A contract is any callable taking (environment, frame); raising AbortError reverts it
ContractHandler = Callable[['Environment', CallFrame], None]

class Environment:
    """Execution environment shared by accounts, system contracts and the bootloader"""
    
    def __init__(self, logger, state: State = None, nonce_holder: NonceHolder = None):
        self.logger = logger
        self.state = state if state is not None else State()
        self.nonce_holder = nonce_holder if nonce_holder is not None else NonceHolder(logger)
        self.contracts: Dict[str, ContractHandler] = {}
        
        # Compute budget of the transaction in flight; set by the dispatcher
        self.gas_remaining = 0
        
        # Every attempted call, in order, including ones later reverted
        self.trace: List[CallFrame] = []
    
    def register_contract(self, address: str, handler: ContractHandler):
        self.contracts[address] = handler
    
    def get_contract(self, address: str) -> Optional[ContractHandler]:
        return self.contracts.get(address)
    
    def get_balance(self, address: str) -> int:
        return self.state.get_balance(address)
    
    def begin_transaction(self, gas_limit: int):
        self.gas_remaining = gas_limit
    
    @contextmanager
    def atomic(self):
        """Restore ledger state if the block raises; the nonce holder is not covered"""
        snapshot = self.state.copy()
        try:
            yield
        except Exception:
            self.state.restore(snapshot)
            raise
    
    def transfer(self, sender: str, target: str, amount: int) -> bool:
        """Plain value transfer without invoking any code at the target"""
        success = self.state.transfer(sender, target, amount)
        if success:
            self.logger.log("STATE", f"Transferred {amount} from {sender[:10]}... to {target[:10]}...")
        return success
    
    def _dispatch(self, frame: CallFrame):
        self.trace.append(frame)
        with self.atomic():
            if not self.state.transfer(frame.sender, frame.target, frame.value):
                raise Insolvent(
                    f"Insufficient balance for value transfer. Has "
                    f"{self.state.get_balance(frame.sender)}, needs {frame.value}")
            handler = self.contracts.get(frame.target)
            if handler is not None:
                handler(self, frame)
    
    def call(self, sender: str, target: str, value: int, data: bytes, gas: int) -> bool:
        """
        Low-level call. Returns False instead of raising when the callee
        aborts; the callee's effects are reverted in that case.
        """
        frame = CallFrame(sender, target, value, data, gas)
        try:
            self._dispatch(frame)
        except AbortError as e:
            self.logger.log("CALL", f"Call {sender[:10]}... -> {target[:10]}... failed: {e}")
            return False
        
        self.logger.log("CALL", f"Call {sender[:10]}... -> {target[:10]}... value: {value}")
        return True
    
    def system_call(self, sender: str, target: str, value: int, data: bytes, gas: int):
        """Privileged call to a system contract; any failure propagates"""
        if not is_system_contract(target):
            raise SystemCallFailed(f"{target} is not a system contract")
        
        frame = CallFrame(sender, target, value, data, gas, is_system=True)
        try:
            self._dispatch(frame)
        except AbortError as e:
            self.logger.log("CALL", f"System call {sender[:10]}... -> {target[:10]}... failed: {e}")
            raise SystemCallFailed(str(e)) from e
        
        self.logger.log("CALL", f"System call {sender[:10]}... -> {target[:10]}... value: {value}")
