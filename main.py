from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi import status

from api.supply.supply import router as supply_router
from database.redis import redis_config
from middleware.solana import solana_config
from utility.config import settings
from utility.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up the application...")

    try:
        await solana_config.initialize()

        if settings.REDIS_URL:
            try:
                await redis_config.initialize()
                logger.info("Redis cache initialized successfully")
            except Exception as e:
                logger.warning(f"Running without cache: {str(e)}")
        else:
            logger.info("REDIS_URL not set, caching disabled")

        logger.info("Endpoint /api/supply is now online")
        yield
    except Exception as e:
        logger.error(f"Startup failed: {str(e)}")
        raise
    finally:
        logger.info("Shutting down the application...")
        await solana_config.close()
        await redis_config.close()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(supply_router, prefix="/api/supply", tags=["supply"])


@app.get("/health", tags=["healthcheck"], status_code=status.HTTP_200_OK)
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def main():
    import asyncio
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    logger.info("Running the application...")
    config = Config()
    config.bind = [f"{settings.HOST}:{settings.PORT}"]

    asyncio.run(serve(app, config))


if __name__ == "__main__":
    main()
