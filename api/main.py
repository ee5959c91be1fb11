import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from auth import guard
from auth import router as auth_router
from charges import router as charges_router
from core import config, db
from core.logging import configure_logging
from judges import router as judges_router
from results import router as results_router
from search import router as search_router
from specification import router as specification_router

configure_logging(config.log_level())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Litigation Analytics API", lifespan=lifespan)

# Allow the dashboard frontend to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router, tags=["auth"])
app.include_router(charges_router.router, tags=["charges"])
app.include_router(judges_router.router, tags=["judges"])
app.include_router(search_router.router, tags=["search"])
app.include_router(specification_router.router, tags=["specification"])
app.include_router(results_router.router, tags=["results"])


@app.exception_handler(guard.LoginRequired)
async def login_required(_: Request, exc: guard.LoginRequired) -> RedirectResponse:
    logger.info("Redirecting unauthenticated request for %s to %s", exc.path, guard.LOGIN_PATH)
    response = RedirectResponse(url=guard.LOGIN_PATH, status_code=307)
    response.delete_cookie(guard.TOKEN_COOKIE)
    response.delete_cookie(guard.PASSWORD_COOKIE)
    return response


@app.get("/login")
def login_page() -> dict:
    return {"message": "POST email and password to /api/login"}


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
