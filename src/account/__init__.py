"""Account core initialization"""
from .access import CallerRole, EntryPoint, resolve_role, is_allowed, check_access
from .validation import ValidationEngine, ValidationResult
from .dispatcher import ExecutionDispatcher
from .smart_account import SmartAccount
from .constants import ACCOUNT_VALIDATION_SUCCESS_MAGIC, SIGNATURE_VALIDATION_MAGIC, NOT_MAGIC

__all__ = ['CallerRole', 'EntryPoint', 'resolve_role', 'is_allowed', 'check_access',
           'ValidationEngine', 'ValidationResult', 'ExecutionDispatcher', 'SmartAccount',
           'ACCOUNT_VALIDATION_SUCCESS_MAGIC', 'SIGNATURE_VALIDATION_MAGIC', 'NOT_MAGIC']
