"""Run the mock API locally: ``python -m mockapi [--host 0.0.0.0] [--port 8000]``."""
from __future__ import annotations

import argparse

import uvicorn


def main() -> None:
    ap = argparse.ArgumentParser(description="Serve the dashboard mock API")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (dev only)")
    args = ap.parse_args()
    uvicorn.run("mockapi.app_factory:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
