import asyncio
from datetime import date
from typing import Optional

from solana.rpc.async_api import AsyncClient
from solders.pubkey import Pubkey

from core.calcvesting import calculate_vesting_remaining
from core.fetchlockeddeposits import fetch_vsr_locked_deposits
from database.models import SupplyBreakdown
from utility.dataconfig import Config
from utility.logger import logger


async def fetch_mint_supply(client: AsyncClient, mint: str = Config.PSY_MINT_ADDRESS):
    resp = await client.get_token_supply(Pubkey.from_string(mint))
    return int(resp.value.amount), resp.value.decimals


async def fetch_treasury_balance(client: AsyncClient, account: str = Config.PSY_DAO_GRANT_ACCOUNT) -> int:
    resp = await client.get_token_account_balance(Pubkey.from_string(account))
    return int(resp.value.amount)


def circulating_amount(total_supply: int, treasury_balance: int, locked_amount: int,
                       vesting_remaining: int, decimals: int) -> float:
    circulating = total_supply - treasury_balance - locked_amount - vesting_remaining
    return circulating / (10 ** decimals)


async def fetch_supply_breakdown(client: AsyncClient, today: Optional[date] = None) -> SupplyBreakdown:
    """
    Retrieves the circulating supply of PSY.

    1. Gathers the total token supply and the DAO grant treasury balance
    2. Subtracts tokens locked in PSY DAO Voter Stake Registry deposits
    3. Subtracts the still unvested part of the reserve
    """
    try:
        (total_supply, decimals), treasury_balance = await asyncio.gather(
            fetch_mint_supply(client),
            fetch_treasury_balance(client),
        )
        locked_amount = await fetch_vsr_locked_deposits(client)
        vesting = calculate_vesting_remaining(today)

        breakdown = SupplyBreakdown(
            total_supply=total_supply,
            treasury_balance=treasury_balance,
            locked_amount=locked_amount,
            vesting_remaining=vesting,
            decimals=decimals,
            circulating_supply=circulating_amount(
                total_supply, treasury_balance, locked_amount, vesting, decimals
            ),
        )
        logger.info(f"Circulating supply computed: {breakdown.circulating_supply}")
        return breakdown

    except Exception as e:
        logger.error(f"Error calculating circulating supply: {str(e)}")
        raise


async def calculate_circulating_supply(client: AsyncClient) -> float:
    breakdown = await fetch_supply_breakdown(client)
    return breakdown.circulating_supply
