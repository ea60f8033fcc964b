from fastapi import APIRouter, Depends, Path

from app.deps import get_repository
from app.repositories.schedule_repository import ScheduleRepository
from app.schemas.reference import FacultyOut, GroupOut, StudyCourseOut, UpdateDateOut

router = APIRouter(tags=["Reference"])


@router.get("/", response_model=UpdateDateOut)
def get_update_date(repo: ScheduleRepository = Depends(get_repository)):
    """取得課表最後更新時間"""
    return UpdateDateOut(update_date=repo.get_update_date())


@router.get("/courses", response_model=list[StudyCourseOut])
def list_courses(repo: ScheduleRepository = Depends(get_repository)):
    return repo.list_courses()


@router.get("/faculties", response_model=list[FacultyOut])
def list_faculties(repo: ScheduleRepository = Depends(get_repository)):
    return repo.list_faculties()


@router.get("/groups/{fac_id}/{course_id}", response_model=list[GroupOut])
def list_groups(
    fac_id: int = Path(..., ge=1),
    course_id: int = Path(..., ge=1),
    repo: ScheduleRepository = Depends(get_repository),
):
    return repo.list_groups(fac_id, course_id)
