# ataxx/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ataxx.api.routes import router as game_router
from ataxx.config import get_settings

app = FastAPI(title="Ataxx AI")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(game_router)


@app.get("/")
async def root():
    return {"message": "Ataxx AI API"}
