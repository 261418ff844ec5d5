"""
Account Core - Access Gate
Maps the immediate caller to a role and decides which entry points it may use
"""
from enum import Enum
from execution.errors import Unauthorized

class CallerRole(Enum):
    TRUSTED_DISPATCHER = "trusted_dispatcher"
    OWNER = "owner"
    OTHER = "other"

class EntryPoint(Enum):
    VALIDATE = "validate_transaction"
    EXECUTE = "execute_transaction"
    EXECUTE_FROM_OUTSIDE = "execute_transaction_from_outside"
    PAY_FOR_TRANSACTION = "pay_for_transaction"
    PREPARE_FOR_PAYMASTER = "prepare_for_paymaster"
    RECEIVE = "receive"

_ALL_ROLES = frozenset(CallerRole)

ALLOWED_ROLES = {
    EntryPoint.VALIDATE: frozenset({CallerRole.TRUSTED_DISPATCHER}),
    EntryPoint.EXECUTE: frozenset({CallerRole.TRUSTED_DISPATCHER, CallerRole.OWNER}),
    EntryPoint.EXECUTE_FROM_OUTSIDE: _ALL_ROLES,
    EntryPoint.PAY_FOR_TRANSACTION: _ALL_ROLES,
    EntryPoint.PREPARE_FOR_PAYMASTER: _ALL_ROLES,
    EntryPoint.RECEIVE: _ALL_ROLES,
}

def resolve_role(caller: str, dispatcher_address: str, owner: str) -> CallerRole:
    """Derive the caller's role; the dispatcher wins if it is also the owner"""
    if caller == dispatcher_address:
        return CallerRole.TRUSTED_DISPATCHER
    if caller == owner:
        return CallerRole.OWNER
    return CallerRole.OTHER

def is_allowed(role: CallerRole, entry_point: EntryPoint) -> bool:
    return role in ALLOWED_ROLES[entry_point]

def check_access(caller: str, entry_point: EntryPoint, dispatcher_address: str,
                 owner: str, logger=None) -> CallerRole:
    """Return the caller's role, or raise Unauthorized"""
    role = resolve_role(caller, dispatcher_address, owner)
    if not is_allowed(role, entry_point):
        if logger is not None:
            logger.log("ACCESS", f"Denied {entry_point.value} to {caller[:10]}... ({role.value})")
        raise Unauthorized(f"Caller {caller} ({role.value}) may not call {entry_point.value}")
    return role
