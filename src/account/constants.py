"""
Account Core - Protocol Constants
"""
from execution.addresses import BOOTLOADER_ADDRESS, DEPLOYER_SYSTEM_CONTRACT

# Returned by validate_transaction when the account accepts an operation
ACCOUNT_VALIDATION_SUCCESS_MAGIC = bytes.fromhex("202bcce7")

# Returned by is_valid_signature when the owner signed the digest
SIGNATURE_VALIDATION_MAGIC = bytes.fromhex("1626ba7e")

NOT_MAGIC = bytes(4)

__all__ = ['ACCOUNT_VALIDATION_SUCCESS_MAGIC', 'SIGNATURE_VALIDATION_MAGIC', 'NOT_MAGIC',
           'BOOTLOADER_ADDRESS', 'DEPLOYER_SYSTEM_CONTRACT']
