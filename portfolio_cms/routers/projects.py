from fastapi import APIRouter, Depends, status
from typing import List
from sqlalchemy.orm import Session
from portfolio_cms.database import get_db
from portfolio_cms.repositories import content
from portfolio_cms.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate

router = APIRouter()
admin_router = APIRouter()

@router.get("/projects", response_model=List[ProjectResponse])
def get_projects(db: Session = Depends(get_db)):
    return content.projects.get_all(db)

@router.get("/projects/{project_id}", response_model=ProjectResponse)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return content.projects.get(db, project_id)

@admin_router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(data: ProjectCreate, db: Session = Depends(get_db)):
    return content.projects.create(db, data.model_dump())

@admin_router.patch("/projects/{project_id}", response_model=ProjectResponse)
def update_project(project_id: int, data: ProjectUpdate, db: Session = Depends(get_db)):
    return content.projects.update(db, project_id, data.model_dump(exclude_unset=True))

@admin_router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: int, db: Session = Depends(get_db)):
    content.projects.delete(db, project_id)
    return None
