# app/api/routers/rounds.py
"""
Round generation endpoint. Thin wrapper over the group service,
one generator per request.
"""
import random

from fastapi import APIRouter, HTTPException

from app.config.settings import settings
from app.domain.models import GenerateRequest, GenerateResponse
from app.services.group_service import generate, InvalidArgumentError

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse, summary="Generate rotation rounds")
def generate_rounds(req: GenerateRequest):
    """
    Build rounds of 3-6 member groups for members 1..N.

    Missing members/rounds fall back to the configured defaults. Without a
    seed a random one is drawn and returned so the result can be reproduced.
    """
    members = req.members if req.members is not None else settings.DEFAULT_MEMBERS
    rounds = req.rounds if req.rounds is not None else settings.DEFAULT_ROUNDS
    seed = req.seed if req.seed is not None else random.randrange(2**31)

    try:
        results = generate(members, rounds, seed=seed)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return GenerateResponse(members=members, rounds=rounds, seed=seed, results=results)
