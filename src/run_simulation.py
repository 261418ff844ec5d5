"""
Main Simulation Runner
Walks a smart account through the validate/execute protocol, including
the rejection paths, and prints the resulting ledger
"""
import sys
import os
import json
from console import tee_output_to_file
from crypto.keys import KeyPair
from crypto.hashing import hash_hex
from bootloader import Bootloader, Logger
from account.smart_account import SmartAccount
from execution.environment import Environment
from execution.deployer import ContractDeployer, encode_create_call
from execution.addresses import DEPLOYER_SYSTEM_CONTRACT
from execution.errors import AbortError
from execution.transaction import Transaction


def run_simulation(chain_id, initial_balance, transfer_value, gas_limit,
                   max_fee_per_gas, verbose, forward_raw_call_to_deployer: bool = True):
    """
    Run the account protocol scenarios
    
    Args:
        chain_id: Chain identifier mixed into every transaction digest
        initial_balance: Starting balance of the smart account
        transfer_value: Value moved by each transfer scenario
        gas_limit: Gas limit of every transaction
        max_fee_per_gas: Fee per gas unit the account is willing to pay
        verbose: Print detailed logs
        forward_raw_call_to_deployer: Also raw-call the deployer after the system call
    """
    account_address = "0x" + "a" * 40
    recipient = "0x" + "b" * 40
    
    print("="*80)
    print("SMART ACCOUNT SIMULATION")
    print("="*80)
    print(f"Chain: {chain_id}")
    print(f"Initial balance: {initial_balance}")
    print(f"Max fee per tx: {gas_limit * max_fee_per_gas}")
    print("="*80)
    print()
    
    logger = Logger("SIM", verbose)
    env = Environment(logger)
    env.register_contract(DEPLOYER_SYSTEM_CONTRACT, ContractDeployer(logger))
    bootloader = Bootloader(env, logger)
    
    owner = KeyPair()
    stranger = KeyPair()
    account = SmartAccount(account_address, owner.get_address(), env, logger,
                           forward_raw_call_to_deployer=forward_raw_call_to_deployer)
    env.state.set_balance(account_address, initial_balance)
    
    def make_tx(to_addr, value, signer, nonce=None, data=b""):
        if nonce is None:
            nonce = env.nonce_holder.get_min_nonce(account_address)
        tx = Transaction(account_address, to_addr, value, nonce, chain_id, data=data,
                         gas_limit=gas_limit, max_fee_per_gas=max_fee_per_gas)
        tx.sign(signer)
        return tx
    
    results = []
    
    def record(name, expected, success, error):
        ok = success == expected
        results.append({"scenario": name, "success": success, "error": error, "as_expected": ok})
        status = "OK " if ok else "BAD"
        print(f"[{status}] {name}: success={success} {('(' + error + ')') if error else ''}")
    
    # 1. Owner-signed transfer
    first = make_tx(recipient, transfer_value, owner)
    success, error = bootloader.process_transaction(first)
    record("owner transfer", True, success, error)
    
    # 2. Replay of the same transaction
    success, error = bootloader.process_transaction(first)
    record("replay of owner transfer", False, success, error)
    
    # 3. Signature from someone else
    success, error = bootloader.process_transaction(make_tx(recipient, transfer_value, stranger))
    record("non-owner signature", False, success, error)
    
    # 4. More value than the account holds
    success, error = bootloader.process_transaction(
        make_tx(recipient, env.get_balance(account_address) + 1, owner))
    record("insolvent transfer", False, success, error)
    
    # 5. Contract deployment through the deployer
    bytecode_hash = hash_hex(b"simulation-contract")
    deploy = make_tx(DEPLOYER_SYSTEM_CONTRACT, 0, owner,
                     data=encode_create_call(bytecode_hash, salt="sim"))
    success, error = bootloader.process_transaction(deploy)
    record("deploy contract", True, success, error)
    
    # 6. Submission from outside, signed by the owner, then by a stranger
    outside = Transaction(account_address, recipient, transfer_value,
                          env.nonce_holder.get_min_nonce(account_address), chain_id)
    outside.sign(owner)
    try:
        account.execute_transaction_from_outside(stranger.get_address(), outside)
        record("execute from outside", True, True, "")
    except AbortError as e:
        record("execute from outside", True, False, str(e))
    
    forged = Transaction(account_address, recipient, transfer_value,
                         env.nonce_holder.get_min_nonce(account_address), chain_id)
    forged.sign(stranger)
    try:
        account.execute_transaction_from_outside(stranger.get_address(), forged)
        record("forged execute from outside", False, True, "")
    except AbortError as e:
        record("forged execute from outside", False, False, str(e))
    
    print("\n" + "="*80)
    print("FINAL LEDGER")
    print("="*80)
    print(f"  account balance: {env.get_balance(account_address)}")
    print(f"  recipient balance: {env.get_balance(recipient)}")
    print(f"  operator fees: {env.get_balance(bootloader.address)}")
    print(f"  account nonce: {env.nonce_holder.get_min_nonce(account_address)}")
    print(f"  deployed contracts: {env.state.code_addresses()}")
    print(f"  state hash: {env.state.get_hash()}")
    print("="*80)
    
    all_as_expected = all(r["as_expected"] for r in results)
    return logger, results, all_as_expected

if __name__ == "__main__":
    # Load configuration from config/config.json (fall back to sensible defaults)
    config_path = os.path.join(os.path.dirname(__file__), '..', 'config', 'config.json')
    config = {}
    try:
        with open(config_path, 'r', encoding='utf-8') as cf:
            config = json.load(cf)
    except (OSError, ValueError):
        # If config not present or invalid, fall back to defaults below
        config = {}

    # Defaults
    cfg_chain_id = config.get('chain_id', 'test-chain-1')
    cfg_initial_balance = config.get('initial_balance', 1000)
    cfg_transfer_value = config.get('transfer_value', 10)
    cfg_gas_limit = config.get('gas_limit', 10)
    cfg_max_fee_per_gas = config.get('max_fee_per_gas', 1)
    cfg_verbose = config.get('verbose', True)
    cfg_forward_raw_call_to_deployer = config.get('forward_raw_call_to_deployer', True)

    log_txt_path = os.path.join("logs", "run_simulation_output.txt")
    with tee_output_to_file(log_txt_path):
        print(f"[run_simulation] Writing console output to {log_txt_path}")

        logger, results, success = run_simulation(
            chain_id=cfg_chain_id,
            initial_balance=cfg_initial_balance,
            transfer_value=cfg_transfer_value,
            gas_limit=cfg_gas_limit,
            max_fee_per_gas=cfg_max_fee_per_gas,
            verbose=cfg_verbose,
            forward_raw_call_to_deployer=cfg_forward_raw_call_to_deployer
        )
        
        with open('logs/simulation_log.json', 'w') as f:
            json.dump({"results": results, "logs": logger.get_logs()}, f, indent=2)
        
        print(f"\nLogs saved to logs/simulation_log.json")
        print(f"Text output saved to {log_txt_path}")
        
        if success:
            print("\nSimulation PASSED")
            sys.exit(0)
        else:
            print("\nSimulation FAILED")
            sys.exit(1)
