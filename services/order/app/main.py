"""
Order Service - FastAPI エントリーポイント

CQRS パターンに従い、Command (POST) と Query (GET) を分離する。
ユースケースには DB セッション由来のリポジトリと、
Redis ハンドラを登録したディスパッチャを注入する。
"""

import logging
import os
from collections.abc import Iterator
from contextlib import asynccontextmanager

import redis
from fastapi import Depends, FastAPI, HTTPException
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from .commands import CreateOrderUseCase
from .dispatcher import EventDispatcher
from .dto import OrderInputDTO, OrderOutputDTO
from .errors import OrderAlreadyExistsError
from .events import OrderCreated
from .handlers import OrderCreatedHandler
from .queries import ListOrdersUseCase
from .repository import SQLOrderRepository, create_schema

logger = logging.getLogger(__name__)

DATABASE_URL = os.environ["DATABASE_URL"]
REDIS_URL = os.environ.get("REDIS_URL", "redis://localhost:6379")

engine = create_engine(DATABASE_URL, echo=False)
session_factory = sessionmaker(engine, expire_on_commit=False)
redis_client: redis.Redis | None = None
event_dispatcher = EventDispatcher()


@asynccontextmanager
async def lifespan(app: FastAPI):
    global redis_client
    create_schema(engine)
    redis_client = redis.Redis.from_url(REDIS_URL, decode_responses=True)
    event_dispatcher.register("OrderCreated", OrderCreatedHandler(redis_client))
    yield
    event_dispatcher.clear()
    redis_client.close()


app = FastAPI(title="Order Service", lifespan=lifespan)


# ── Dependencies ─────────────────────────────────

def get_session() -> Iterator[Session]:
    with session_factory() as session:
        yield session


def get_event_dispatcher() -> EventDispatcher:
    return event_dispatcher


# ── Command Endpoints (Write 側) ─────────────────

@app.post("/order", response_model=OrderOutputDTO)
def create_order(
    req: OrderInputDTO,
    session: Session = Depends(get_session),
    dispatcher: EventDispatcher = Depends(get_event_dispatcher),
):
    """注文作成コマンド"""
    use_case = CreateOrderUseCase(SQLOrderRepository(session), OrderCreated(), dispatcher)
    try:
        return use_case.execute(req)
    except OrderAlreadyExistsError as e:
        logger.warning("Rejected duplicate order %s", e.order_id)
        raise HTTPException(409, str(e)) from e


# ── Query Endpoints (Read 側) ────────────────────

@app.get("/order", response_model=list[OrderOutputDTO])
def list_orders(session: Session = Depends(get_session)):
    """全注文を取得"""
    return ListOrdersUseCase(SQLOrderRepository(session)).execute()


@app.get("/health")
async def health():
    return {"status": "ok", "service": "order-service"}
