import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from expense_api import models  # noqa: F401  registers tables on Base
from expense_api.config import Config
from expense_api.db import Base, engine
from expense_api.logger import setup_logger
from expense_api.routes.auth import router as auth_router
from expense_api.routes.expenses import router as expenses_router

logger = setup_logger(__name__, Config.LOG_LEVEL)
Config.validate()

Base.metadata.create_all(bind=engine)

# ---------- FastAPI app ----------
app = FastAPI(title="Expense Tracker API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(expenses_router)


@app.get("/")
def root():
    return {"message": "Expense Tracker API running"}


logger.info("Expense Tracker API ready (database: %s)", engine.url.render_as_string(hide_password=True))


def run() -> None:
    uvicorn.run("expense_api.main:app", host="0.0.0.0", port=8000, reload=True)


if __name__ == "__main__":
    run()
