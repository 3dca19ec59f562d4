from fastapi import APIRouter, HTTPException, status
from solana.exceptions import SolanaRpcException
from solana.rpc.core import RPCException

from core.calcsupply import fetch_supply_breakdown
from core.fetchlockeddeposits import fetch_locked_deposits
from database.models import LockedDeposits, SupplyBreakdown
from database.redis import cached
from middleware.solana import solana_config
from utility.config import settings
from utility.logger import logger

router = APIRouter()


def get_client():
    if solana_config.client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Solana RPC client is not initialized"
        )
    return solana_config.client


async def _run(call):
    try:
        return await call(get_client())
    except (SolanaRpcException, RPCException) as e:
        logger.error(f"RPC request failed: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to read from RPC endpoint"
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("", response_model=SupplyBreakdown)
@cached(expire=settings.CACHE_EXPIRE_SECONDS)
async def get_supply():
    breakdown = await _run(fetch_supply_breakdown)
    return breakdown.model_dump()


@router.get("/circulating", response_model=float)
@cached(expire=settings.CACHE_EXPIRE_SECONDS)
async def get_circulating_supply():
    breakdown = await _run(fetch_supply_breakdown)
    return breakdown.circulating_supply


@router.get("/locked", response_model=LockedDeposits)
@cached(expire=settings.CACHE_EXPIRE_SECONDS)
async def get_locked_deposits():
    locked = await _run(fetch_locked_deposits)
    return locked.model_dump(mode="json")
