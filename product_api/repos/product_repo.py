# product_api/repos/product_repo.py
from decimal import Decimal
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from product_api.data.models.product import ProductModel
from product_api.domain.errors import ProductNotFound


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def fetch_one(self, product_id: int) -> ProductModel:
        product = self.db.get(ProductModel, product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    def fetch_range(self, start: int, count: int) -> List[ProductModel]:
        #bez ORDER BY, kolejnosc taka jak zwroci baza
        stmt = select(ProductModel).offset(start).limit(count)
        return list(self.db.execute(stmt).scalars().all())

    def insert(self, name: str, price: Decimal) -> int:
        product = ProductModel(name=name, price=price)
        self.db.add(product)
        self.db.flush()
        return product.id

    def update(self, product_id: int, name: str, price: Decimal) -> None:
        # rowcount nie jest sprawdzany, update nieistniejacego id to "sukces"
        self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(name=name, price=price)
        )

    def delete(self, product_id: int) -> None:
        self.db.execute(delete(ProductModel).where(ProductModel.id == product_id))

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
