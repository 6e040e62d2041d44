from __future__ import annotations

import pytest

from redemptions.adapters.memory import InMemoryToken, InMemoryVault, KnownContracts
from redemptions.settlement.engine import Redemptions
from redemptions.tests.support import ASSET_A, ASSET_B, ASSET_C, CLAIM_TOKEN, OTHER, REDEEMER


@pytest.fixture
def contracts() -> KnownContracts:
    return KnownContracts([CLAIM_TOKEN, ASSET_A, ASSET_B, ASSET_C])


@pytest.fixture
def vault() -> InMemoryVault:
    return InMemoryVault({ASSET_A: 500, ASSET_B: 200})


@pytest.fixture
def token() -> InMemoryToken:
    return InMemoryToken(CLAIM_TOKEN, {REDEEMER: 100, OTHER: 900})


@pytest.fixture
def redemptions(vault: InMemoryVault, token: InMemoryToken, contracts: KnownContracts) -> Redemptions:
    return Redemptions(vault, token, [ASSET_A, ASSET_B], inspector=contracts)
