"""
Bootloader - Trusted Dispatcher
Drives the two-phase account protocol (validate, pay, execute) for each
submitted transaction against the simulated environment.
"""
import time
from typing import List, Dict, Tuple

from execution.addresses import BOOTLOADER_ADDRESS
from execution.environment import Environment
from execution.errors import AbortError
from execution.transaction import Transaction
from account.validation import ValidationResult
from account.smart_account import SmartAccount

class Logger:
    """Simple logger for debugging and testing"""
    
    def __init__(self, source: str, verbose: bool = True):
        self.source = source
        self.verbose = verbose
        self.logs = []
    
    def log(self, category: str, message: str):
        """Log a message"""
        timestamp = time.time()
        log_entry = f"[{self.source[:8]}] [{category}] {message}"
        self.logs.append({
            "timestamp": timestamp,
            "source": self.source,
            "category": category,
            "message": message
        })
        if self.verbose:
            print(log_entry)
    
    def get_logs(self) -> List[Dict]:
        """Get all logs"""
        return self.logs

class Bootloader:
    """Trusted dispatcher: always validates before it executes"""
    
    def __init__(self, environment: Environment, logger: Logger,
                 address: str = BOOTLOADER_ADDRESS):
        self.environment = environment
        self.logger = logger
        self.address = address
    
    def _account_for(self, tx: Transaction) -> SmartAccount:
        account = self.environment.get_contract(tx.from_addr)
        if not isinstance(account, SmartAccount):
            raise AbortError(f"No smart account deployed at {tx.from_addr}")
        return account
    
    def process_transaction(self, tx: Transaction) -> Tuple[bool, str]:
        """
        Run one transaction through validation, fee payment and execution
        Returns (success, error_message)
        """
        try:
            account = self._account_for(tx)
            self.environment.begin_transaction(tx.gas_limit)
            tx_hash = tx.encode_hash()
            signed_hash = tx.signed_hash()
            
            magic = account.validate_transaction(self.address, tx_hash, signed_hash, tx)
            if ValidationResult.from_magic(magic) is not ValidationResult.ACCEPTED:
                self.logger.log("BOOTLOADER", f"Dropped tx {tx.tx_hash[:16]}...: invalid magic value")
                return False, "Account validation returned invalid magic value"
            
            if tx.paymaster is None:
                account.pay_for_transaction(self.address, tx_hash, signed_hash, tx)
            else:
                account.prepare_for_paymaster(self.address, tx_hash, signed_hash, tx)
            
            account.execute_transaction(self.address, tx_hash, signed_hash, tx)
        except AbortError as e:
            self.logger.log("BOOTLOADER", f"Tx {tx.tx_hash[:16]}... aborted: {type(e).__name__}: {e}")
            return False, str(e)
        finally:
            self.environment.begin_transaction(0)
        
        self.logger.log("BOOTLOADER", f"Tx {tx.tx_hash[:16]}... processed")
        return True, ""
    
    def process_transactions(self, transactions: List[Transaction]) -> List[str]:
        """
        Process an ordered batch of transactions
        Returns list of tx hashes that succeeded
        """
        executed_txs = []
        
        for tx in transactions:
            success, error = self.process_transaction(tx)
            if success:
                executed_txs.append(tx.tx_hash)
            # Even if a transaction fails, we continue with others
        
        return executed_txs
