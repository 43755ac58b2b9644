import asyncio
from typing import Optional

from app.core.config import settings

# Задержки (мс), имитирующие сетевые запросы
LOGIN = 800
REGISTER = 1000
LOGOUT = 500
LIST_USERS = 600
LIST = 700
GET_USER = 400
GET = 500
CREATE = 1000
CREATE_USER = 800
UPDATE = 800
DELETE = 800


async def simulate_latency(ms: int, scale: Optional[float] = None) -> None:
    """Ожидание, имитирующее сетевой запрос"""
    if scale is None:
        scale = settings.latency_scale
    if scale <= 0:
        return
    await asyncio.sleep(ms * scale / 1000)
