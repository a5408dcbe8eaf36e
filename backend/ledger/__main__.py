"""Serve the API: `python -m ledger` or the `ledger-api` script."""
import uvicorn

from ledger.config import HOST, LOG_LEVEL, PORT


def main() -> None:
    uvicorn.run("ledger.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
