from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from config import get_settings

# cost factor for seeded credentials (BCRYPT_ROUNDS)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=get_settings().bcrypt_rounds)

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)

async def hash_password_async(password: str) -> str:
    # bcrypt is deliberately slow; keep it off the event loop
    return await run_in_threadpool(hash_password, password)
