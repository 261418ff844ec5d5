"""Execution layer initialization"""
from .state import State
from .transaction import Transaction
from .nonce_holder import NonceHolder
from .environment import Environment, CallFrame
from .deployer import ContractDeployer, encode_create_call
from .addresses import BOOTLOADER_ADDRESS, NONCE_HOLDER_ADDRESS, DEPLOYER_SYSTEM_CONTRACT

__all__ = ['State', 'Transaction', 'NonceHolder', 'Environment', 'CallFrame',
           'ContractDeployer', 'encode_create_call',
           'BOOTLOADER_ADDRESS', 'NONCE_HOLDER_ADDRESS', 'DEPLOYER_SYSTEM_CONTRACT']
