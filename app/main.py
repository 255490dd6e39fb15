# app/main.py
#
# Course likes routes plus the reverse-string function, served from one app.

# Settings and the Supabase clients read the environment at import time,
# so .env has to be loaded before the routers are imported.
from dotenv import load_dotenv  # noqa: E402

load_dotenv()

from app.api import likes, reverse_string  # noqa: E402
from fastapi import FastAPI  # noqa: E402

app = FastAPI(title="Course Likes API")

app.include_router(likes.router)
app.include_router(reverse_string.router)
