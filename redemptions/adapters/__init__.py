from .chain import Web3ContractInspector
from .interfaces import Authorizer, ContractInspector, RedeemableToken, Vault
from .memory import InMemoryToken, InMemoryVault, KnownContracts, RoleTable

__all__ = [
    "Authorizer",
    "ContractInspector",
    "RedeemableToken",
    "Vault",
    "InMemoryToken",
    "InMemoryVault",
    "KnownContracts",
    "RoleTable",
    "Web3ContractInspector",
]
