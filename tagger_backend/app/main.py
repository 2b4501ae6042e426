# tagger_backend/app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tagger_backend.app.config.manifest import validate_manifest
from tagger_backend.app.observability.log import get_logger
from tagger_backend.app.routers import tagger

log = get_logger("main")

app = FastAPI(title="Tagger API")

# --- CORS for Vite dev -------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Routers under /api ------------------------------------------------------
app.include_router(tagger.router, prefix="/api")

@app.on_event("startup")
async def _report_manifest():
    manifest = validate_manifest()
    if manifest["status"] != "ok":
        log.warning(f"taxonomy manifest: {manifest}")
    else:
        log.info(f"taxonomy locales: {', '.join(manifest['locales'])}")

# --- Health ------------------------------------------------------------------
@app.get("/health")
async def health():
    return {"ok": True}

@app.get("/api/health")
async def api_health():
    # mirror the non-prefixed /health so the FE's /api/health succeeds
    return {"ok": True, "manifest": validate_manifest()}
