from typing import List, Optional, Tuple

from base58 import b58encode
from solana.rpc.async_api import AsyncClient
from solana.rpc.types import MemcmpOpts
from solders.pubkey import Pubkey

from core.vsrlayout import (
    DISCRIMINATOR_SIZE,
    VOTER_DISCRIMINATOR,
    VOTER_LAYOUT,
    decode_registrar,
    decode_voter,
)
from database.models import DepositEntry, DepositWithWallet, LockedDeposits, LockupKind, Registrar
from utility.dataconfig import Config
from utility.logger import logger


def get_registrar_address(
    realm: str = Config.PSY_REALM_ID,
    mint: str = Config.PSY_MINT_ADDRESS,
    program_id: str = Config.VOTER_STAKE_REGISTRY_PROGRAM_ID,
) -> Tuple[Pubkey, int]:
    seeds = [
        bytes(Pubkey.from_string(realm)),
        Config.REGISTRAR_SEED,
        bytes(Pubkey.from_string(mint)),
    ]
    return Pubkey.find_program_address(seeds, Pubkey.from_string(program_id))


def find_voting_mint_index(registrar: Registrar, mint: str) -> Optional[int]:
    """Index of ``mint`` in the registrar's voting mints, or None if it is not configured."""
    for index, voting_mint in enumerate(registrar.voting_mints):
        if voting_mint.mint == mint:
            return index
    return None


def is_locked_deposit(deposit: DepositEntry, mint_index: Optional[int]) -> bool:
    if mint_index is None:
        return False
    return (
        deposit.is_used
        and deposit.lockup.kind != LockupKind.NONE
        and deposit.voting_mint_config_idx == mint_index
    )


def voter_filters(registrar_pk: Pubkey) -> list:
    return [
        DISCRIMINATOR_SIZE + VOTER_LAYOUT.sizeof(),
        MemcmpOpts(offset=0, bytes=b58encode(VOTER_DISCRIMINATOR).decode()),
        MemcmpOpts(offset=Config.VOTER_REGISTRAR_OFFSET, bytes=str(registrar_pk)),
    ]


async def fetch_registrar(client: AsyncClient, registrar_pk: Pubkey) -> Registrar:
    resp = await client.get_account_info(registrar_pk)
    if resp.value is None:
        raise ValueError(f"Registrar account {registrar_pk} not found")
    return decode_registrar(resp.value.data)


async def fetch_locked_deposits(client: AsyncClient, mint: str = Config.PSY_MINT_ADDRESS) -> LockedDeposits:
    """Collect every in-use, locked VSR deposit of ``mint`` together with its owner wallet."""
    registrar_pk, _ = get_registrar_address(mint=mint)
    registrar = await fetch_registrar(client, registrar_pk)

    mint_index = find_voting_mint_index(registrar, mint)
    if mint_index is None:
        logger.warning(f"Mint {mint} is not a voting mint of registrar {registrar_pk}")
        return LockedDeposits(total=0)

    resp = await client.get_program_accounts(
        Pubkey.from_string(Config.VOTER_STAKE_REGISTRY_PROGRAM_ID),
        encoding="base64",
        filters=voter_filters(registrar_pk),
    )
    voters = resp.value or []
    logger.info(f"Fetched {len(voters)} voter accounts for registrar {registrar_pk}")

    deposits: List[DepositWithWallet] = []
    deposit_sum = 0
    for keyed_account in voters:
        voter = decode_voter(keyed_account.account.data)
        for deposit in voter.deposits:
            if not is_locked_deposit(deposit, mint_index):
                continue
            deposit_sum += deposit.amount_deposited_native
            deposits.append(DepositWithWallet(
                voter=str(keyed_account.pubkey),
                wallet=voter.voter_authority,
                deposit=deposit,
            ))

    return LockedDeposits(total=deposit_sum, deposits=deposits)


async def fetch_vsr_locked_deposits(client: AsyncClient, mint: str = Config.PSY_MINT_ADDRESS) -> int:
    locked = await fetch_locked_deposits(client, mint)
    return locked.total
