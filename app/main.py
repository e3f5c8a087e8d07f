from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.files import router as files_router
from app.api.users import router as users_router
from app.config import CORS_ORIGINS
from app.logging_config import configure_logging, log_requests

configure_logging()

app = FastAPI(
    title="PermissionInfo Demo API",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Process-Time"],
)
app.middleware("http")(log_requests)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(users_router)
app.include_router(files_router)
