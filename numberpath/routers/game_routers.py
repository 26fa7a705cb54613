# import moduls/libraries
import json
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session
from uuid import UUID
from pathlib import Path


# import form project
from numberpath.core.database import get_db
from numberpath.schemas import GameCreate, GameRead, MoveRequest, MoveResponse, PathUpdate, LevelJump, HintResponse
from numberpath.services import GameServices
from numberpath.visualization.puzzle_visualization import generate_puzzle_visualization


# create Jinja2 template engine
templates = Jinja2Templates(directory=Path(__file__).parent.parent / "templates")

router = APIRouter()


# Create game
@router.post("/", response_model=GameRead, status_code=201)
def create_game(game_create: GameCreate, db: Session = Depends(get_db)):
    """Start a new game at a level"""
    services = GameServices(db)
    game = services.create_game(level=game_create.level, topology=game_create.topology)
    return services.serialize_game(game)


# Get game by id
@router.get("/{game_id}", response_model=GameRead)
def get_game(game_id: UUID, db: Session = Depends(get_db)):
    """Fetch the current state of a game"""
    services = GameServices(db)
    game = services.get_game_by_id(game_id)
    return services.serialize_game(game)


# load board page
@router.get("/{game_id}/board", response_class=HTMLResponse)
def show_board(request: Request, game_id: UUID, db: Session = Depends(get_db)):
    """Show the game board"""
    services = GameServices(db)
    game = services.get_game_by_id(game_id)
    return templates.TemplateResponse(request, "board.html", {"game": services.serialize_game(game)})


# Replace the drawn path
@router.put("/{game_id}/path", response_model=GameRead)
def update_path(game_id: UUID, path_update: PathUpdate, db: Session = Depends(get_db)):
    """Set the whole player path and check for a win"""
    services = GameServices(db)
    game = services.set_path(game_id, path_update.path)
    return services.serialize_game(game)


# Drag step
@router.post("/{game_id}/moves", response_model=MoveResponse)
def move(game_id: UUID, move_request: MoveRequest, db: Session = Depends(get_db)):
    """Extend the path onto a cell, or step back onto the previous one"""
    services = GameServices(db)
    game, changed = services.move(game_id, move_request.row, move_request.col)
    return {"changed": changed, "game": services.serialize_game(game)}


@router.post("/{game_id}/reset", response_model=GameRead)
def reset_game(game_id: UUID, db: Session = Depends(get_db)):
    """Clear the drawn path"""
    services = GameServices(db)
    game = services.reset(game_id)
    return services.serialize_game(game)


@router.post("/{game_id}/next", response_model=GameRead)
def next_level(game_id: UUID, db: Session = Depends(get_db)):
    """Move on to (or skip to) the next level"""
    services = GameServices(db)
    game = services.next_level(game_id)
    return services.serialize_game(game)


@router.post("/{game_id}/prev", response_model=GameRead)
def prev_level(game_id: UUID, db: Session = Depends(get_db)):
    """Go back one level"""
    services = GameServices(db)
    game = services.prev_level(game_id)
    return services.serialize_game(game)


@router.post("/{game_id}/jump", response_model=GameRead)
def jump_to_level(game_id: UUID, level_jump: LevelJump, db: Session = Depends(get_db)):
    """Jump to a level (levels below 1 start at 1)"""
    services = GameServices(db)
    game = services.jump_to_level(game_id, level_jump.level)
    return services.serialize_game(game)


@router.post("/{game_id}/hint", response_model=HintResponse)
def reveal_hint(game_id: UUID, db: Session = Depends(get_db)):
    """Show one more number from the solution"""
    services = GameServices(db)
    game, hint = services.reveal_hint(game_id)
    revealed = None
    if hint is not None:
        pos, step = hint
        revealed = {"row": pos.row, "col": pos.col, "step": step}
    return {"hint": revealed, "game": services.serialize_game(game)}


@router.post("/{game_id}/answer", response_model=GameRead)
def reveal_answer(game_id: UUID, db: Session = Depends(get_db)):
    """Give up and show the solution"""
    services = GameServices(db)
    game = services.reveal_answer(game_id)
    return services.serialize_game(game)


# Serialize board figure to JSON for visualization
@router.get("/{game_id}/figure", response_class=JSONResponse)
def get_game_figure(game_id: UUID, db: Session = Depends(get_db)):
    """Get the board with the drawn path as a Plotly figure"""
    services = GameServices(db)
    game = services.get_game_by_id(game_id)
    state = services.load_state(game)
    fig = generate_puzzle_visualization(state.puzzle, path=state.user_path, title=f"Level {game.level}")
    return JSONResponse(content=json.loads(fig.to_json()))
