"""FastAPI app entrypoint."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ledger.config import ALLOWED_ORIGINS, APP_NAME
from ledger.logging_config import configure_logging
from ledger.routers import balances

configure_logging()

app = FastAPI(
    title=APP_NAME,
    description="Split group expenses. Work out who owes whom and the fewest payments to settle up.",
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(balances.router, prefix="/api")


@app.get("/")
def root():
    return {"message": APP_NAME, "docs": "/docs"}


@app.get("/health")
def health():
    return {"status": "ok"}
