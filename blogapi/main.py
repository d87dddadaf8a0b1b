import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogapi import __version__
from blogapi.config import settings
from blogapi.database import engine
from blogapi.errors import BadRequestError, bad_request_handler
from blogapi.middleware import TimingMiddleware
from blogapi.routers import all_routers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting blog API (%s)", settings.APP_ENV)
    yield
    await engine.dispose()


app = FastAPI(
    title="Blog API",
    description="Blogs, tags, categories, drafts, comments and likes",
    version=__version__,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(BadRequestError, bad_request_handler)

# Routers
for router in all_routers:
    app.include_router(router, prefix=settings.API_PREFIX)


@app.get("/")
@app.get("/health")
async def health():
    return {"status": "healthy", "version": __version__}
