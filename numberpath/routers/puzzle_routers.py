# import moduls/libraries
import json
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from uuid import UUID


# import form project
from numberpath.core.database import get_db
from numberpath.engine import level_config
from numberpath.schemas import PuzzleGenerate, PuzzleRead, LevelRead
from numberpath.services import PuzzleServices
from numberpath.visualization.puzzle_visualization import generate_puzzle_visualization


router = APIRouter()


# Level settings
@router.get("/levels/{level}", response_model=LevelRead)
def get_level(level: int):
    """Grid size, hidden rate and obstacle count for a level"""
    return level_config(level)


# Generate puzzle (sync: the search runs in the threadpool)
@router.post("/generate", response_model=PuzzleRead, status_code=201)
def generate_puzzle(puzzle_generate: PuzzleGenerate, db: Session = Depends(get_db)):
    """Generate and store a new puzzle"""
    services = PuzzleServices(db)
    puzzle = services.generate_puzzle(puzzle_generate)
    return services.serialize_puzzle(puzzle)


# Get puzzle by id
@router.get("/{puzzle_id}", response_model=PuzzleRead)
def get_puzzle(puzzle_id: UUID, db: Session = Depends(get_db)):
    """Fetch one puzzle by ID"""
    services = PuzzleServices(db)
    puzzle = services.get_puzzle_by_id(puzzle_id)
    return services.serialize_puzzle(puzzle)


# Serialize solution figure to JSON for puzzle visualization
@router.get("/{puzzle_id}/figure", response_class=JSONResponse)
def get_puzzle_figure(puzzle_id: UUID, db: Session = Depends(get_db)):
    """Get the solved puzzle as a Plotly figure"""
    services = PuzzleServices(db)
    puzzle = services.get_puzzle_by_id(puzzle_id)
    fig = generate_puzzle_visualization(services.to_instance(puzzle))
    return JSONResponse(content=json.loads(fig.to_json()))
