from __future__ import annotations

from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from redemptions.domain.models import to_address


class Web3ContractInspector:
    """Treats an address as a contract when the node reports deployed code for it."""

    def __init__(self, w3: Web3):
        self.w3 = w3

    @classmethod
    def from_rpc(cls, rpc_url: str, *, poa: bool = False, timeout: int = 10) -> "Web3ContractInspector":
        w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))
        if poa:
            w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
        return cls(w3)

    def is_contract(self, address: str) -> bool:
        code = self.w3.eth.get_code(to_address(address))
        return len(code) > 0
