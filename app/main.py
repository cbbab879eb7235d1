# app/main.py
import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.routes import employee_router, admin_router
from app.routes.employee import create_error_response
from app.database import connect_to_db, close_db_connection, init_db, insert_sample_data
from app.config import get_settings
from app.errors import EmptyUpdateError, NotFoundError, StoreError, UniqueConstraintError

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_db()
    try:
        await init_db()
        if settings.SEED_SAMPLE_DATA:
            await insert_sample_data()
        yield
    finally:
        # Shutdown
        await close_db_connection()

app = FastAPI(title="Employee Admin", lifespan=lifespan)

app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])
app.include_router(admin_router, prefix=settings.API_PREFIX, tags=["admin"])

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": create_error_response(message="Not found", details=str(exc))},
    )

@app.exception_handler(EmptyUpdateError)
async def empty_update_handler(request: Request, exc: EmptyUpdateError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": create_error_response(
            message="Nothing to update",
            details=str(exc),
            example="Provide at least one of: firstname, lastname, email, phone, department_id"
        )},
    )

@app.exception_handler(UniqueConstraintError)
async def unique_constraint_handler(request: Request, exc: UniqueConstraintError):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": create_error_response(message="Already exists", details=str(exc))},
    )

@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": create_error_response(message="Internal Server Error")},
    )

@app.get("/")
async def root():
    return {"message": "Welcome to the Employee Admin service"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
