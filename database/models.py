from enum import IntEnum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class LockupKind(IntEnum):
    NONE = 0
    DAILY = 1
    MONTHLY = 2
    CLIFF = 3
    CONSTANT = 4


class Lockup(BaseModel):
    start_ts: int
    end_ts: int
    kind: LockupKind


class DepositEntry(BaseModel):
    lockup: Lockup
    amount_deposited_native: int
    amount_initially_locked_native: int
    is_used: bool
    allow_clawback: bool
    voting_mint_config_idx: int


class Voter(BaseModel):
    voter_authority: str
    registrar: str
    deposits: List[DepositEntry]


class VotingMintConfig(BaseModel):
    mint: str
    grant_authority: str
    baseline_vote_weight_scaled_factor: int
    max_extra_lockup_vote_weight_scaled_factor: int
    lockup_saturation_secs: int
    digit_shift: int


class Registrar(BaseModel):
    governance_program_id: str
    realm: str
    realm_governing_token_mint: str
    realm_authority: str
    voting_mints: List[VotingMintConfig]
    time_offset: int
    bump: int


class DepositWithWallet(BaseModel):
    voter: str
    wallet: str
    deposit: DepositEntry


class LockedDeposits(BaseModel):
    total: int
    deposits: List[DepositWithWallet] = Field(default_factory=list)


class SupplyBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_supply: int
    treasury_balance: int
    locked_amount: int
    vesting_remaining: int
    decimals: int
    circulating_supply: float
