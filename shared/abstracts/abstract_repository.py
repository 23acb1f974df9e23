from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession


class AbstractRepository(ABC):
    """
    Minimal, framework-agnostic read contract.

    Concrete implementations should implement these operations.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    @abstractmethod
    async def get(self, entity_id): ...

    @abstractmethod
    async def list(self, **filters): ...
