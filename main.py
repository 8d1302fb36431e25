from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import APP_TITLE, CORS_ORIGINS, LOG_LEVEL
from errors import register_exception_handlers
from logging_config import setup_logging
from routers import author, book

setup_logging(LOG_LEVEL)

# schema is created by scripts/create_tables.py, not at startup
app = FastAPI(title=APP_TITLE)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(author.router)
app.include_router(book.router)
