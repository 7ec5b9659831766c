# product_api/domain/schemas.py
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ProductIn(BaseModel):
    """Schema dla tworzenia i aktualizacji produktu. Ewentualne id w body jest ignorowane."""

    name: str = Field(..., description="Nazwa produktu")
    price: Decimal = Field(..., description="Cena, 2 miejsca po przecinku w bazie")

    #cena tylko jako liczba w jsonie, "11.22" jako string -> 400
    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_number(cls, value):
        if isinstance(value, (str, bool)):
            raise ValueError("price must be a JSON number")
        return value


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""

    id: int
    name: str
    price: Decimal

    model_config = ConfigDict(from_attributes=True)

    #cena w jsonie jako liczba, nie string
    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class ResultOut(BaseModel):
    result: str


class HealthOut(BaseModel):
    status: str
