"""
Account Core - Smart Account
External interface of a single-signer account. Every entry point takes the
immediate caller explicitly and runs as one atomic unit against the ledger;
nonce consumption is the one effect that survives an abort.
"""
from crypto.signature import recover_signer
from execution.addresses import BOOTLOADER_ADDRESS, DEPLOYER_SYSTEM_CONTRACT
from execution.errors import InvalidSignature, PaymentFailed
from execution.transaction import Transaction
from .access import EntryPoint, check_access
from .constants import SIGNATURE_VALIDATION_MAGIC, NOT_MAGIC
from .validation import ValidationEngine, ValidationResult
from .dispatcher import ExecutionDispatcher

class SmartAccount:
    """Programmable account owned by one signing key"""
    
    def __init__(self, address: str, owner: str, environment, logger,
                 dispatcher_address: str = BOOTLOADER_ADDRESS,
                 deployer_address: str = DEPLOYER_SYSTEM_CONTRACT,
                 forward_raw_call_to_deployer: bool = True):
        self.address = address
        self.owner = owner
        self.environment = environment
        self.logger = logger
        self.dispatcher_address = dispatcher_address
        
        self.validation_engine = ValidationEngine(address, owner, environment, logger)
        self.execution_dispatcher = ExecutionDispatcher(
            address, environment, logger,
            deployer_address=deployer_address,
            forward_raw_call_to_deployer=forward_raw_call_to_deployer
        )
        
        environment.register_contract(address, self)
        self.logger.log("ACCOUNT", f"Account {address} created for owner {owner[:10]}...")
    
    def _gate(self, caller: str, entry_point: EntryPoint):
        check_access(caller, entry_point, self.dispatcher_address, self.owner, self.logger)
    
    def validate_transaction(self, caller: str, tx_hash: bytes, suggested_signed_hash: bytes,
                             tx: Transaction) -> bytes:
        """Returns the success magic value, or NOT_MAGIC on a signature mismatch"""
        self._gate(caller, EntryPoint.VALIDATE)
        with self.environment.atomic():
            return self.validation_engine.validate(tx).to_magic()
    
    def execute_transaction(self, caller: str, tx_hash: bytes, suggested_signed_hash: bytes,
                            tx: Transaction):
        # Validation ordering is the dispatcher's responsibility on this path
        self._gate(caller, EntryPoint.EXECUTE)
        with self.environment.atomic():
            self.execution_dispatcher.execute(tx)
    
    def execute_transaction_from_outside(self, caller: str, tx: Transaction):
        self._gate(caller, EntryPoint.EXECUTE_FROM_OUTSIDE)
        with self.environment.atomic():
            result = self.validation_engine.validate(tx)
            if result is not ValidationResult.ACCEPTED:
                raise InvalidSignature(f"Transaction {tx.tx_hash[:16]}... was not signed by the owner")
            self.execution_dispatcher.execute(tx)
    
    def pay_for_transaction(self, caller: str, tx_hash: bytes, suggested_signed_hash: bytes,
                            tx: Transaction):
        self._gate(caller, EntryPoint.PAY_FOR_TRANSACTION)
        fee = tx.max_fee()
        with self.environment.atomic():
            if not self.environment.transfer(self.address, self.dispatcher_address, fee):
                self.logger.log("PAY", f"Could not pay fee {fee} for {self.address[:10]}...")
                raise PaymentFailed("Failed to pay the fee to the operator")
        self.logger.log("PAY", f"Paid fee {fee} to {self.dispatcher_address[:10]}...")
    
    def prepare_for_paymaster(self, caller: str, tx_hash: bytes, suggested_signed_hash: bytes,
                              tx: Transaction):
        self._gate(caller, EntryPoint.PREPARE_FOR_PAYMASTER)
        self.logger.log("PAY", f"Paymaster {tx.paymaster} requested; nothing to prepare")
    
    def is_valid_signature(self, digest: bytes, signature: bytes) -> bytes:
        """Contract-signature check of a raw digest against the owner"""
        if recover_signer(digest, signature) == self.owner:
            return SIGNATURE_VALIDATION_MAGIC
        return NOT_MAGIC
    
    def __call__(self, env, frame):
        # Receive entry: the environment has already credited the value
        self._gate(frame.sender, EntryPoint.RECEIVE)
        self.logger.log("ACCOUNT", f"Received {frame.value} from {frame.sender[:10]}...")
