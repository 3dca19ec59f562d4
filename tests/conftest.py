"""Shared builders for raw VSR account data and mocked RPC responses."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from solders.pubkey import Pubkey

from core.vsrlayout import (
    MAX_DEPOSITS,
    MAX_VOTING_MINTS,
    REGISTRAR_DISCRIMINATOR,
    REGISTRAR_LAYOUT,
    VOTER_DISCRIMINATOR,
    VOTER_LAYOUT,
)
from database.models import LockupKind
from utility.dataconfig import Config

PSY_MINT = Pubkey.from_string(Config.PSY_MINT_ADDRESS)


def make_deposit(
    *,
    amount: int = 0,
    is_used: bool = True,
    kind: LockupKind = LockupKind.CLIFF,
    mint_index: int = 0,
) -> dict:
    return {
        "lockup": {"start_ts": 1_650_000_000, "end_ts": 1_700_000_000, "kind": int(kind)},
        "amount_deposited_native": amount,
        "amount_initially_locked_native": amount,
        "is_used": is_used,
        "allow_clawback": False,
        "voting_mint_config_idx": mint_index,
    }


def make_voter_data(authority: Pubkey, registrar: Pubkey, deposits: list[dict]) -> bytes:
    slots = deposits + [make_deposit(is_used=False, kind=LockupKind.NONE)] * (MAX_DEPOSITS - len(deposits))
    return VOTER_DISCRIMINATOR + VOTER_LAYOUT.build({
        "voter_authority": bytes(authority),
        "registrar": bytes(registrar),
        "deposits": slots,
        "voter_bump": 255,
        "voter_weight_record_bump": 254,
    })


def make_registrar_data(mints: list[Pubkey]) -> bytes:
    mints = mints + [Pubkey.default()] * (MAX_VOTING_MINTS - len(mints))
    return REGISTRAR_DISCRIMINATOR + REGISTRAR_LAYOUT.build({
        "governance_program_id": bytes(Pubkey.from_string(Config.SPL_GOVERNANCE_PROGRAM_ID)),
        "realm": bytes(Pubkey.from_string(Config.PSY_REALM_ID)),
        "realm_governing_token_mint": bytes(PSY_MINT),
        "realm_authority": bytes(Pubkey.new_unique()),
        "voting_mints": [
            {
                "mint": bytes(mint),
                "grant_authority": bytes(Pubkey.default()),
                "baseline_vote_weight_scaled_factor": 1_000_000_000,
                "max_extra_lockup_vote_weight_scaled_factor": 0,
                "lockup_saturation_secs": 0,
                "digit_shift": 0,
            }
            for mint in mints
        ],
        "time_offset": 0,
        "bump": 253,
    })


def keyed_account(data: bytes, pubkey: Pubkey | None = None) -> MagicMock:
    keyed = MagicMock()
    keyed.pubkey = pubkey or Pubkey.new_unique()
    keyed.account.data = data
    return keyed


@pytest.fixture
def rpc_client():
    """Mock AsyncClient with no accounts configured."""
    client = MagicMock()
    client.get_account_info = AsyncMock()
    client.get_program_accounts = AsyncMock(return_value=MagicMock(value=[]))
    client.get_token_supply = AsyncMock()
    client.get_token_account_balance = AsyncMock()
    return client
