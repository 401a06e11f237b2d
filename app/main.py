# app/main.py
import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from app import database
from app.models import ProductIn
from storefront.models import Product

logger = logging.getLogger(__name__)

app = FastAPI(title="storefront catalog (in-memory demo)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------
# Product endpoints
# ---------------------------
@app.get("/products", response_model=List[Product])
async def list_products():
    return list(database.PRODUCTS.values())


@app.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: int):
    p = database.PRODUCTS.get(product_id)
    if not p:
        raise HTTPException(status_code=404, detail="product not found")
    return p


@app.post("/products", status_code=201, response_model=Product)
async def register_product(payload: ProductIn):
    product = database.add_product(payload.model_dump())
    logger.info("registered product %s", product["id"])
    return product

# ---------------------------
# Utility: reset / seed (for tests/demo)
# ---------------------------
@app.post("/reset")
async def reset_all():
    database.reset()
    return {"status": "reset"}


@app.post("/seed")
async def seed_products():
    database.seed()
    return {"status": "seeded", "count": len(database.PRODUCTS)}


if __name__ == "__main__":
    import uvicorn

    database.seed()
    uvicorn.run(app, host="0.0.0.0", port=8085)
