# product_api/api/routers/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from starlette.convertors import Convertor, register_url_convertor

from product_api.data.database import get_db
from product_api.domain.errors import DataAccessError, ProductNotFound
from product_api.domain.schemas import ProductIn, ProductOut, ResultOut
from product_api.services.product_service import ProductService

MAX_COUNT = 10
# jak strconv.Atoi: wartosci spoza int64 sa saturowane
INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


class DigitsConvertor(Convertor):
    """Segment sciezki pasuje tylko gdy sa same cyfry; wartosc zostaje stringiem."""

    regex = "[0-9]+"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value) -> str:
        return str(value)


# /product/abc nie pasuje do zadnej trasy -> zwykle 404 z routera
register_url_convertor("digits", DigitsConvertor())

router = APIRouter(tags=["products"])


def get_service(db: Session):
    return ProductService(db)


def parse_product_id(raw: str) -> int:
    # przy regexie [0-9]+ ta galaz w praktyce nie wystepuje
    try:
        product_id = int(raw)
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail="Invalid product ID")
    if product_id < 0:
        raise HTTPException(status_code=400, detail="Invalid product ID")
    return product_id


def _int_or_zero(raw: Optional[str]) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return 0
    return max(INT64_MIN, min(value, INT64_MAX))


def clamp_page(start: int, count: int) -> tuple[int, int]:
    if count > MAX_COUNT or count < 1:
        count = MAX_COUNT
    if start < 0:
        start = 0
    return start, count


@router.get("/products", response_model=List[ProductOut])
def list_products(
    count: Optional[str] = Query(None),
    start: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    Lista produktow, domyslnie start=0 i count=10.
    count spoza [1, 10] -> 10, ujemny start -> 0.
    """
    start_, count_ = clamp_page(_int_or_zero(start), _int_or_zero(count))
    svc = get_service(db)
    try:
        return svc.list_products(start_, count_)
    except DataAccessError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/product", response_model=ProductOut, status_code=201)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.create_product(payload)
    except DataAccessError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/product/{product_id:digits}", response_model=ProductOut)
def get_product(product_id: str, db: Session = Depends(get_db)):
    pid = parse_product_id(product_id)
    svc = get_service(db)
    try:
        return svc.get_product(pid)
    except ProductNotFound:
        raise HTTPException(status_code=404, detail="Product not found")
    except DataAccessError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/product/{product_id:digits}", response_model=ProductOut)
def update_product(product_id: str, payload: ProductIn, db: Session = Depends(get_db)):
    """
    Id z URL wygrywa z ewentualnym id w body.
    Update nieistniejacego produktu tez zwraca 200.
    """
    pid = parse_product_id(product_id)
    svc = get_service(db)
    try:
        return svc.update_product(pid, payload)
    except DataAccessError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/product/{product_id:digits}", response_model=ResultOut)
def delete_product(product_id: str, db: Session = Depends(get_db)):
    pid = parse_product_id(product_id)
    svc = get_service(db)
    try:
        svc.delete_product(pid)
    except DataAccessError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"result": "success"}
