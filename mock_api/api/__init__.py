# mock_api/api/__init__.py
from fastapi import FastAPI
from mock_api.api.routers import products, customers
from mock_api.api.routers.health import router as health_router

def create_app() -> FastAPI:
    app = FastAPI(
        title="Lookup Service (dev mock)",
        version="1.0.0",
    )

    # Include routers
    app.include_router(health_router)
    app.include_router(products.router)
    app.include_router(customers.router)

    return app
