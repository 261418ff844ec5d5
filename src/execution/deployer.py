"""
Execution Layer - Contract Deployer
System contract that places bytecode hashes at derived addresses.
Deployment requests are honored on privileged (system) calls only.
"""
import json
from typing import Any, Dict
from crypto.hashing import canonical_json, hash_hex
from .addresses import DEPLOYER_SYSTEM_CONTRACT
from .errors import DeploymentError

def encode_create_call(bytecode_hash: str, salt: str = "", constructor_input: bytes = b"") -> bytes:
    """Build the payload asking the deployer to create a contract"""
    return canonical_json({
        "method": "create",
        "bytecode_hash": bytecode_hash,
        "salt": salt,
        "input": constructor_input.hex()
    })

def decode_deploy_request(data: bytes) -> Dict[str, Any]:
    try:
        request = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise DeploymentError(f"Malformed deployer payload: {e}") from e
    if not isinstance(request, dict):
        raise DeploymentError("Deployer payload must be an object")
    return request

def create_address(sender: str, bytecode_hash: str, salt: str, constructor_input: str) -> str:
    digest = hash_hex(canonical_json({
        "sender": sender,
        "bytecode_hash": bytecode_hash,
        "salt": salt,
        "input": constructor_input
    }))
    return "0x" + digest[-40:]

class ContractDeployer:
    """Deploys contracts on behalf of privileged callers"""
    
    def __init__(self, logger, address: str = DEPLOYER_SYSTEM_CONTRACT):
        self.logger = logger
        self.address = address
    
    def __call__(self, env, frame):
        if not frame.is_system:
            # Plain calls only carry value
            return
        
        request = decode_deploy_request(frame.data)
        if request.get("method") != "create":
            raise DeploymentError(f"Unsupported deployer method: {request.get('method')}")
        
        bytecode_hash = request.get("bytecode_hash")
        if not bytecode_hash:
            raise DeploymentError("Missing bytecode hash")
        
        new_address = create_address(frame.sender, bytecode_hash,
                                     request.get("salt", ""), request.get("input", ""))
        if env.state.get_code(new_address) is not None:
            raise DeploymentError(f"Code already deployed at {new_address}")
        
        env.state.set_code(new_address, bytecode_hash)
        if frame.value:
            env.state.transfer(self.address, new_address, frame.value)
        
        self.logger.log("DEPLOY", f"Deployed {bytecode_hash[:16]}... at {new_address} "
                                  f"for {frame.sender[:10]}...")
