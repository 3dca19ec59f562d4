from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment

from utility.config import settings
from utility.logger import logger


class SolanaConfig:
    def __init__(self):
        self.RPC_URL = settings.RPC_URL
        self.client = None

    async def initialize(self):
        try:
            self.client = AsyncClient(
                self.RPC_URL,
                commitment=Commitment(settings.RPC_COMMITMENT),
                timeout=settings.RPC_TIMEOUT,
            )
            logger.info(f"Solana RPC client created for {self.RPC_URL}")
            return self
        except Exception as e:
            raise Exception(f"Failed to initialize Solana client: {str(e)}")

    async def close(self):
        if self.client:
            await self.client.close()
            self.client = None


solana_config = SolanaConfig()
