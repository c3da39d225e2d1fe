# order_cart/product_service/main.py
from fastapi import FastAPI, HTTPException

app = FastAPI(title="Product Service (dev mock)")


PRODUCTS = {
    "1": {"id": "1", "name": "Keyboard", "price": 199.99, "description": "Mechanical keyboard", "imageUrl": None},
    "2": {"id": "2", "name": "Mouse", "price": 49.50, "description": "Wireless mouse", "imageUrl": None},
    "3": {"id": "3", "name": "Monitor", "price": 899.00, "description": "27 inch monitor", "imageUrl": None},
}

@app.get("/products/{product_id}")
def get_product(product_id: str):
    product = PRODUCTS.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
