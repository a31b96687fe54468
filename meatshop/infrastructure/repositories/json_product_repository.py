"""
Snapshot-backed implementation of ProductRepository
"""

import logging
from dataclasses import replace

from meatshop.domain.entities.product_entity import Product
from meatshop.domain.repositories.product_repository import ProductRepository
from meatshop.infrastructure.persistence.app_state import AppState
from meatshop.infrastructure.persistence.json_store import JsonStateStore, managed_snapshot


class JsonProductRepository(ProductRepository):
    """
    Catalog stored in the application state snapshot.

    Reads hand out copies and saves store a copy, so edits only reach the
    catalog through save().
    """

    def __init__(self, state: AppState, store: JsonStateStore):
        self._state = state
        self._store = store
        self._logger = logging.getLogger(self.__class__.__name__)

    async def find_all(self) -> list[Product]:
        return [replace(p) for p in self._state.products]

    async def find_by_id(self, product_id: str) -> Product | None:
        product = next((p for p in self._state.products if p.id == product_id), None)
        return replace(product) if product else None

    async def save(self, product: Product) -> Product:
        stored = replace(product)
        with managed_snapshot(self._store, self._state) as state:
            for index, existing in enumerate(state.products):
                if existing.id == product.id:
                    state.products[index] = stored
                    self._logger.info("Product %s updated", product.id)
                    break
            else:
                state.products.insert(0, stored)
                self._logger.info("Product %s added to catalog", product.id)
        return product
