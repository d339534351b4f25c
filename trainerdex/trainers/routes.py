"""FastAPI router for trainer accounts."""

from fastapi import APIRouter

from trainerdex.db.dependencies import PoolDep
from trainerdex.errors import on_failure
from trainerdex.trainers import database as db
from trainerdex.trainers.models import (
    LoginRequest,
    NameUpdate,
    PasswordUpdate,
    TrainerCreate,
    ZipcodeUpdate,
)

router = APIRouter(tags=["trainers"])


@router.post("/login")
@on_failure(data=[])
async def login(request: LoginRequest, pool: PoolDep):
    """Check credentials. Returns the trainer's profile row, or no rows."""
    return {"data": await db.login(pool, request.username, request.password)}


@router.post("/insert-user")
async def insert_user(request: TrainerCreate, pool: PoolDep):
    await db.insert_trainer(
        pool,
        username=request.username,
        name=request.name,
        password=request.password,
        start_date=request.start_date,
        zipcode=request.zipcode,
        timezone=request.timezone,
    )
    return {"success": True}


@router.get("/user/{username}")
@on_failure(data=[])
async def get_user(username: str, pool: PoolDep):
    trainer = await db.fetch_trainer(pool, username)
    return {"data": [trainer] if trainer else []}


@router.post("/user/name")
async def update_name(request: NameUpdate, pool: PoolDep):
    await db.update_name(pool, request.username, request.name)
    return {"success": True}


@router.post("/user/password")
async def update_password(request: PasswordUpdate, pool: PoolDep):
    await db.update_password(pool, request.username, request.password)
    return {"success": True}


@router.post("/user/zipcode")
async def update_zipcode(request: ZipcodeUpdate, pool: PoolDep):
    await db.update_zipcode(pool, request.username, request.zipcode, request.timezone)
    return {"success": True}
