"""
Account Core - Execution Dispatcher
Applies an admitted operation's effects
"""
from execution.addresses import DEPLOYER_SYSTEM_CONTRACT
from execution.errors import ExecutionFailed
from execution.transaction import Transaction

class ExecutionDispatcher:
    """Execution phase of the account protocol"""
    
    def __init__(self, account_address: str, environment, logger,
                 deployer_address: str = DEPLOYER_SYSTEM_CONTRACT,
                 forward_raw_call_to_deployer: bool = True):
        self.account_address = account_address
        self.environment = environment
        self.logger = logger
        self.deployer_address = deployer_address
        # When True, a deployer-targeted operation is also sent as a raw call
        # after the system call. This matches the reference account and is
        # most likely an unintended duplicate dispatch; see DESIGN.md.
        self.forward_raw_call_to_deployer = forward_raw_call_to_deployer
    
    def execute(self, tx: Transaction):
        to = tx.to_addr
        value = tx.value
        data = tx.data
        env = self.environment
        
        if to == self.deployer_address:
            self.logger.log("EXECUTE", f"Routing tx {tx.tx_hash[:16]}... through the deployer system call")
            env.system_call(self.account_address, to, value, data, env.gas_remaining)
            if not self.forward_raw_call_to_deployer:
                return
        
        success = env.call(self.account_address, to, value, data, env.gas_remaining)
        if not success:
            raise ExecutionFailed("Failed to execute the transaction")
        
        self.logger.log("EXECUTE", f"Executed tx {tx.tx_hash[:16]}... -> {to[:10]}... value: {value}")
