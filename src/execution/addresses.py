"""
Execution Layer - Reserved System Addresses
"""

def _system_address(index: int) -> str:
    return "0x" + format(index, "040x")

BOOTLOADER_ADDRESS = _system_address(0x8001)
NONCE_HOLDER_ADDRESS = _system_address(0x8003)
DEPLOYER_SYSTEM_CONTRACT = _system_address(0x8006)

# Addresses at or below this bound are reachable through system calls only
MAX_SYSTEM_CONTRACT_ADDRESS = 0xffff

def is_system_contract(address: str) -> bool:
    if not address.startswith("0x") or len(address) != 42:
        return False
    try:
        return int(address, 16) <= MAX_SYSTEM_CONTRACT_ADDRESS
    except ValueError:
        return False
