"""
Execution Layer - Abort Taxonomy
Every exception here aborts the current invocation as a whole
"""

class AbortError(Exception):
    """Fatal abort of the current invocation"""

class Unauthorized(AbortError):
    """Caller is not permitted to invoke this entry point"""

class InvalidSignature(Unauthorized):
    """Recovered signer does not match the account owner"""

class ReplayOrOutOfOrder(AbortError):
    """Nonce does not equal the expected value for the account"""

class Insolvent(AbortError):
    """Required balance exceeds available balance"""

class ExecutionFailed(AbortError):
    """Raw call to the target reported failure"""

class SystemCallFailed(AbortError):
    """Privileged call to a system contract failed"""

class PaymentFailed(AbortError):
    """Fee could not be forwarded to the operator"""

class DeploymentError(AbortError):
    """Contract deployer rejected the request"""
