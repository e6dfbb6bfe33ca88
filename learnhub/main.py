from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers.catalog import router as catalog_router

app = FastAPI(title="LearnHub Catalog")

# Enable CORS if needed
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Update for production
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# ----------------------
# Route Includes
# ----------------------
# Read-only: content arrives through `learnhub seed`, never over HTTP.
app.include_router(catalog_router)


@app.get("/healthz")
async def healthz():
    return {"ok": True}
