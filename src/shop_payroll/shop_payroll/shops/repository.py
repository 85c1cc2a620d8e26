from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Shop


class ShopRepository(Protocol):
    def get_by_id(self, shop_id: int) -> Optional[Shop]:
        raise NotImplementedError

    def list_by_admin(self, admin_id: int) -> Sequence[Shop]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Shop]:
        raise NotImplementedError

    def create(self, shop: Shop) -> int:
        """Insert a shop (its shop_id is ignored). Returns the new id."""

        raise NotImplementedError
