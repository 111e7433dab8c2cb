"""FastAPI application exposing the generation, analysis and hashing engine."""

import logging
from fastapi import FastAPI, HTTPException
from shared.config.config import config
from shared.domain.models import (
    GenerationConfig,
    StrengthReport,
    HashRequest,
    HashResult,
    AnalyzeRequest,
    VerifyRequest,
    GenerateResponse,
)
from shared.domain.consts import HealthStatus
from shared.domain.errors import ConfigurationError, HashError
from engine.services.password_generator import generate_from_config
from engine.services.strength_analyzer import analyze_strength
from engine.services.hash_engine import hash_password_async, verify_password_async

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="PrimePass Service")


@app.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint for Docker healthchecks.

    Returns:
        Dict with status "ok" if service is healthy.
    """
    return {"status": HealthStatus.OK}


@app.post("/generate", response_model=GenerateResponse)
async def generate_endpoint(options: GenerationConfig) -> GenerateResponse:
    """
    Generate a password for the given options and score it.

    Raises:
        HTTPException: If the options leave no usable characters (400 status).
    """
    try:
        password, pool = generate_from_config(options)
    except ConfigurationError as e:
        logger.info(f"Rejected generate request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return GenerateResponse(
        password=password,
        pool_size=len(pool),
        strength=analyze_strength(password),
    )


@app.post("/analyze", response_model=StrengthReport)
async def analyze_endpoint(payload: AnalyzeRequest) -> StrengthReport:
    """Score a password and return improvement suggestions."""
    return analyze_strength(payload.password)


@app.post("/hash", response_model=HashResult)
async def hash_endpoint(payload: HashRequest) -> HashResult:
    """
    Hash a password with the selected algorithm.

    bcrypt runs on a worker thread; its latency grows with the cost.

    Raises:
        HTTPException: If the cost is out of range or hashing fails (400 status).
    """
    try:
        return await hash_password_async(payload)
    except (ConfigurationError, HashError) as e:
        logger.info(f"Rejected hash request for {payload.algorithm.value}: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/verify")
async def verify_endpoint(payload: VerifyRequest) -> dict:
    """
    Check a password against a previously computed digest.

    bcrypt verification runs on a worker thread, like hashing.

    Returns:
        Dict with "valid" set to the verification outcome.
    """
    try:
        valid = await verify_password_async(payload.password, payload.digest, payload.algorithm)
    except HashError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"valid": valid}
