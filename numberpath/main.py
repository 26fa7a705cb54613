from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from fastapi.staticfiles import StaticFiles
from pathlib import Path

from numberpath.core.config import settings
from numberpath.core.database import Base, engine
from numberpath.routers import puzzle_routers, game_routers
from utils.logger_config import configure_logging

configure_logging(settings.LOG_FILE)

# Create database tables
Base.metadata.create_all(bind=engine)

# create FastAPI
app = FastAPI(title="Number Path API", version="1.0")

# create Jinja2 template engine/define templates directory
templates = Jinja2Templates(directory=Path(__file__).parent / "templates")

# mount static files
app.mount("/static", StaticFiles(directory=Path(__file__).parent / "static"), name="static")

# get routers
app.include_router(puzzle_routers.router, prefix="/puzzles", tags=["Puzzles"])
app.include_router(game_routers.router, prefix="/games", tags=["Games"])


# Landing page
@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"default_topology": settings.DEFAULT_TOPOLOGY})
