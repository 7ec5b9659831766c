# product_api/domain/errors.py


class ProductNotFound(Exception):
    """Brak wiersza o podanym id."""

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class DataAccessError(Exception):
    """Kazdy inny blad bazy (polaczenie, constraint, ...). Tekst to oryginalny komunikat."""
