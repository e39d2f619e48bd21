"""Course API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ValidationError
from typing import Dict, List, Optional
from database.db_manager import DatabaseManager
from database.exceptions import DuplicateError
from api.dependencies import get_db
from models import Course, Hole

router = APIRouter()


class HoleInput(BaseModel):
    number: int
    par: int = 4
    handicap: int
    ladies_handicap: Optional[int] = None
    tee_yardages: Dict[str, int] = {}


class CreateCourseRequest(BaseModel):
    name: str
    location: Optional[str] = None
    slope: int = 113
    rating: float = 72.0
    holes: List[HoleInput] = []


@router.get("", response_model=List[Course])
async def list_courses(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: DatabaseManager = Depends(get_db),
):
    return db.courses.list_courses(limit=limit, offset=offset)


@router.get("/{course_id}", response_model=Course)
async def get_course(course_id: str, db: DatabaseManager = Depends(get_db)):
    course = db.courses.get_course(course_id)
    if not course:
        raise HTTPException(404, "Course not found")
    return course


@router.post("", response_model=Course, status_code=201)
async def create_course(req: CreateCourseRequest, db: DatabaseManager = Depends(get_db)):
    try:
        course = Course(
            name=req.name,
            location=req.location,
            slope=req.slope,
            rating=req.rating,
            holes=[Hole(**h.model_dump()) for h in req.holes],
        )
    except ValidationError as e:
        raise HTTPException(422, e.errors()[0]['msg'])
    try:
        return db.courses.create_course(course)
    except DuplicateError:
        raise HTTPException(409, f"Course '{req.name}' already exists")


@router.delete("/{course_id}", status_code=204)
async def delete_course(course_id: str, db: DatabaseManager = Depends(get_db)):
    if not db.courses.delete_course(course_id):
        raise HTTPException(404, "Course not found")
