from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import db, settings
from core.errors import register_error_handlers
from core.log import configure_logging
from industries import router as industries_router
from invoices import router as invoices_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="BizTime API", lifespan=lifespan)

# Browser origins allowed to call this API; none unless CORS_ALLOW_ORIGINS is set.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(industries_router.router, tags=["industries"])
app.include_router(invoices_router.router, tags=["invoices"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "biztime api"}
