import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from reelgen import auth
from reelgen.api.serializers import serialize_reel, serialize_user
from reelgen.db import repository
from reelgen.db.models import User
from reelgen.db.session import get_db
from reelgen.errors import ReelgenError
from reelgen.llm.base import LLMClient
from reelgen.llm.client import get_llm_client
from reelgen.pipeline.generator import generate_reel
from reelgen.schemas import (
    GenerationRequest,
    GenerationResult,
    SavedReelOut,
    SaveReelRequest,
    SessionOut,
    SignInRequest,
    SignUpRequest,
    UserOut,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


# ============================================================
# GENERATION
# ============================================================

@router.post("/generate-reel", response_model=GenerationResult)
def generate(
    request: GenerationRequest,
    client: LLMClient = Depends(get_llm_client),
):
    try:
        return generate_reel(request, client)
    except ReelgenError:
        raise
    except Exception as e:
        logger.exception("Error in generate-reel")
        return JSONResponse(status_code=500, content={"error": str(e) or "Unknown error"})


# ============================================================
# AUTH
# ============================================================

@router.post("/auth/signup", response_model=UserOut, status_code=201)
def sign_up(request: SignUpRequest, db: Session = Depends(get_db)):
    user = auth.sign_up(db, request.email, request.password, request.display_name)
    return serialize_user(user)


@router.post("/auth/signin", response_model=SessionOut)
def sign_in(request: SignInRequest, db: Session = Depends(get_db)):
    token, user = auth.sign_in(db, request.email, request.password)
    return SessionOut(access_token=token, user=serialize_user(user))


@router.post("/auth/signout", status_code=204)
def sign_out(
    token: str = Depends(auth.bearer_token),
    db: Session = Depends(get_db),
):
    auth.sign_out(db, token)
    return Response(status_code=204)


@router.get("/auth/user", response_model=UserOut)
def get_user(user: User = Depends(auth.current_user)):
    return serialize_user(user)


# ============================================================
# SAVED REELS
# ============================================================

@router.get("/reels", response_model=List[SavedReelOut])
def list_reels(
    user: User = Depends(auth.current_user),
    db: Session = Depends(get_db),
):
    return [serialize_reel(reel) for reel in repository.list_reels(db, user.id)]


@router.post("/reels", response_model=SavedReelOut, status_code=201)
def save_reel(
    request: SaveReelRequest,
    user: User = Depends(auth.current_user),
    db: Session = Depends(get_db),
):
    reel = repository.insert_reel(db, user.id, request, request.result, title=request.title)
    logger.info("Reel %s saved for user %s", reel.id, user.id)
    return serialize_reel(reel)


@router.get("/reels/{reel_id}", response_model=SavedReelOut)
def get_reel(
    reel_id: str,
    user: User = Depends(auth.current_user),
    db: Session = Depends(get_db),
):
    return serialize_reel(repository.get_reel(db, user.id, reel_id))


@router.delete("/reels/{reel_id}", status_code=204)
def delete_reel(
    reel_id: str,
    user: User = Depends(auth.current_user),
    db: Session = Depends(get_db),
):
    repository.delete_reel(db, user.id, reel_id)
    return Response(status_code=204)
