from __future__ import annotations

import time
from abc import ABC, abstractmethod

from models.schemas import ChatMessageRequest, ChatResponse


class BaseAgent(ABC):
    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    async def process(self, message: ChatMessageRequest) -> ChatResponse:
        raise NotImplementedError

    async def timed(self, coro):
        start = time.perf_counter()
        result = await coro
        return result, int((time.perf_counter() - start) * 1000)
