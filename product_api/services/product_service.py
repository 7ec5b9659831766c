# product_api/services/product_service.py
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_api.domain.errors import DataAccessError
from product_api.domain.schemas import ProductIn, ProductOut
from product_api.repos.product_repo import ProductRepo
from product_api.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Use case'y dla domeny product.
    Jedno zapytanie na operacje, bez retry. Bledy SQLAlchemy -> rollback + DataAccessError,
    ProductNotFound przechodzi bez zmian.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def _fail(self, op: str, e: SQLAlchemyError) -> DataAccessError:
        self.repo.rollback()
        logger.error(f"{op} failed: {e}")
        return DataAccessError(str(e))

    #query
    def get_product(self, product_id: int) -> ProductOut:
        try:
            product = self.repo.fetch_one(product_id)
        except SQLAlchemyError as e:
            raise self._fail(f"Fetch product {product_id}", e) from e
        return ProductOut.model_validate(product)

    def list_products(self, start: int, count: int) -> List[ProductOut]:
        try:
            products = self.repo.fetch_range(start, count)
        except SQLAlchemyError as e:
            raise self._fail(f"List products start={start} count={count}", e) from e
        return [ProductOut.model_validate(p) for p in products]

    #commands
    def create_product(self, payload: ProductIn) -> ProductOut:
        try:
            new_id = self.repo.insert(payload.name, payload.price)
            self.repo.commit()
        except SQLAlchemyError as e:
            raise self._fail("Create product", e) from e

        logger.info(f"Utworzono produkt {new_id}")
        return ProductOut(id=new_id, name=payload.name, price=payload.price)

    def update_product(self, product_id: int, payload: ProductIn) -> ProductOut:
        try:
            self.repo.update(product_id, payload.name, payload.price)
            self.repo.commit()
        except SQLAlchemyError as e:
            raise self._fail(f"Update product {product_id}", e) from e

        logger.info(f"Zaktualizowano produkt {product_id}")
        # zwracamy to co przyszlo w requescie, bez ponownego odczytu z bazy
        return ProductOut(id=product_id, name=payload.name, price=payload.price)

    def delete_product(self, product_id: int) -> None:
        try:
            self.repo.delete(product_id)
            self.repo.commit()
        except SQLAlchemyError as e:
            raise self._fail(f"Delete product {product_id}", e) from e

        logger.info(f"Usunieto produkt {product_id}")
