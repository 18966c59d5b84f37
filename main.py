# main.py
import logging
import os
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

# Routers
from api_trips import trips_router
from api_vehicles import vehicles_router

# Services
from services.catalogue import CATALOGUE, VehicleNotFound

logger = logging.getLogger(__name__)

# -----------------------------
# Env / host + port
# -----------------------------
load_dotenv()

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8000


def env_host(raw: Optional[str] = None) -> str:
    raw = os.getenv("HOST") if raw is None else raw
    return (raw or "").strip() or DEFAULT_HOST


def env_port(raw: Optional[str] = None) -> int:
    raw = os.getenv("PORT") if raw is None else raw
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw.strip())
    except ValueError:
        raise SystemExit(f"Invalid PORT value {raw!r}: expected an integer") from None
    if not 0 < port < 65536:
        raise SystemExit(f"Invalid PORT value {raw!r}: out of range 1-65535")
    return port


APP_DIR = os.path.dirname(os.path.abspath(__file__))
STATIC_DIR = os.path.join(APP_DIR, "static")

# -----------------------------
# FastAPI setup
# -----------------------------
app = FastAPI(title="Vehicle Trip Calculator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(trips_router)     # /calculate-time, /calculate-distance
app.include_router(vehicles_router)  # /vehicles

if os.path.isdir(STATIC_DIR):
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


# -----------------------------
# Error handlers
# -----------------------------
@app.exception_handler(VehicleNotFound)
async def vehicle_not_found(request: Request, exc: VehicleNotFound):
    return JSONResponse(status_code=400, content={"error": VehicleNotFound.message})


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError):
    details = [
        {"loc": [str(p) for p in e.get("loc", ())], "msg": e.get("msg", "")}
        for e in exc.errors()
    ]
    logger.info("Rejected %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": details})


# Serve UI
@app.get("/", include_in_schema=False)
def index():
    f = os.path.join(STATIC_DIR, "index.html")
    if os.path.exists(f):
        return FileResponse(f)
    return JSONResponse({"ok": True, "msg": "UI not found; put index.html in /static"})


@app.get("/health")
def health():
    return {"ok": True, "service": "trip-calculator", "vehicles": len(CATALOGUE)}


# -----------------------------
# Entrypoint
# -----------------------------
def run() -> None:
    host, port = env_host(), env_port()
    logger.info("Server running at http://%s:%s", host, port)
    # uvicorn exits non-zero with its own message if the bind fails
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:     %(name)s - %(message)s")
    run()
