# product_api/data/models/product.py
from sqlalchemy import CheckConstraint, Column, Integer, Numeric, Text

from product_api.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=0, server_default="0.00")

    __table_args__ = (CheckConstraint("name <> ''", name="products_name_not_empty"),)
