# app/main.py
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.routes import hello_router, employee_router, user_router
from app.database import connect_to_mongo, close_mongo_connection, init_db, insert_sample_data
from app.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    client = connect_to_mongo(settings)
    app.state.mongo_client = client
    app.state.db = client[settings.MONGODB_DB_NAME]
    await init_db(app.state.db)
    if settings.SEED_SAMPLE_DATA:
        await insert_sample_data(app.state.db)
    yield
    # Shutdown
    close_mongo_connection(client)

app = FastAPI(title="Employee List", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Required fields are all-or-nothing; the response does not name the field
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    if any(error["loc"] and error["loc"][0] == "body" for error in exc.errors()):
        return JSONResponse(status_code=400, content={"error": "Missing field required"})
    return JSONResponse(status_code=400, content={"error": "Invalid request parameters"})

app.include_router(hello_router, prefix=settings.API_PREFIX, tags=["hello"])
app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])
app.include_router(user_router, prefix=settings.API_PREFIX, tags=["users"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
