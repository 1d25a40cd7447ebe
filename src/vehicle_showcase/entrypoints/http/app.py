from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vehicle_showcase.config import configure_logging, cors_origins
from vehicle_showcase.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_showcase.entrypoints.http.routes.health import router as health_router
from vehicle_showcase.entrypoints.http.routes.vehicles import router as vehicles_router


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Vehicle Showcase API",
        description="""
        Browse our collection of vehicles.

        ## Features
        - List vehicles with filters, sorting and pagination
        - Get vehicle details

        ## Error Handling
        All errors return `{"statusCode", "message", "error"}` JSON bodies.
        Validation errors list every violated rule in `message`.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    # The showcase frontend calls the API from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(vehicles_router, prefix="/v1")

    return app


app = build_app()
