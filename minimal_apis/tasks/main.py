# minimal_apis/tasks/main.py

"""
FastAPI Task Service API.
Keeps a list of tasks and the completed subset. No route requires
authentication.
"""
import logging
from datetime import datetime
from typing import List

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..common import config as server_config
from ..common.crud import RecordNotFound, Repository
from ..common.db import init_tables
from ..common.errors import register_exception_handlers
from ..common.logging_config import setup_logging
from .db import Base, engine, get_db
from .models import Task
from .schemas import TaskIn, TaskResponse

# -----------------------------
# Configure Logging
# -----------------------------
setup_logging()
logger = logging.getLogger(__name__)


# -----------------------------
# FastAPI App Initialization
# -----------------------------
app = FastAPI(
    title="Task Service API",
    description="Manages a list of tasks",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=server_config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def startup_event():
    init_tables(Base, engine, "Task Service")


def get_repository(db: Session = Depends(get_db)) -> Repository[Task]:
    return Repository(db, Task)


@app.get("/", response_class=PlainTextResponse, summary="Root endpoint")
async def read_root():
    return f"Bem-Vindo a Api Tarefas - {datetime.now():%Y-%m-%d %H:%M:%S}"


@app.get("/health", status_code=status.HTTP_200_OK, summary="Health check endpoint")
async def health_check():
    return {"status": "ok", "service": "task-service"}


# -----------------------------
# CRUD Endpoints
# -----------------------------


@app.get("/tarefas", response_model=List[TaskResponse], summary="List all tasks")
def list_tasks(repo: Repository[Task] = Depends(get_repository)):
    tasks = repo.list_all()
    logger.info(f"Retrieved {len(tasks)} tasks.")
    return tasks


# Declared before /tarefas/{task_id} so "concluidas" is not read as an id.
@app.get(
    "/tarefas/concluidas",
    response_model=List[TaskResponse],
    summary="List completed tasks",
)
def list_completed_tasks(repo: Repository[Task] = Depends(get_repository)):
    tasks = repo.list_all(Task.is_completed.is_(True))
    logger.info(f"Retrieved {len(tasks)} completed tasks.")
    return tasks


@app.get("/tarefas/{task_id}", response_model=TaskResponse, summary="Retrieve a task by ID")
def get_task(task_id: int, repo: Repository[Task] = Depends(get_repository)):
    logger.info(f"Fetching task with ID: {task_id}")
    try:
        return repo.find_by_id(task_id)
    except RecordNotFound:
        logger.warning(f"Task with ID: {task_id} not found.")
        raise HTTPException(status_code=404, detail="Task not found")


@app.post(
    "/tarefas",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
def create_task(
    task: TaskIn,
    response: Response,
    repo: Repository[Task] = Depends(get_repository),
):
    """
    Creates a task and points the `Location` header at it.
    Any id in the body is ignored.
    """
    logger.info(f"Creating task: {task.name}")
    try:
        db_task = repo.insert(task.model_dump(exclude={"id"}))
    except SQLAlchemyError as e:
        logger.error(f"Error creating task: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not create task.",
        )
    response.headers["Location"] = f"/tarefas/{db_task.id}"
    logger.info(f"Task '{db_task.name}' (ID: {db_task.id}) created successfully.")
    return db_task


@app.put("/tarefas/{task_id}", response_model=TaskResponse, summary="Update an existing task")
def update_task(
    task_id: int,
    updated: TaskIn,
    repo: Repository[Task] = Depends(get_repository),
):
    """
    Overwrites the name and completion flag of a task.

    - The body id must equal the path id, otherwise 400.
    - Raises 404 if the task does not exist.
    """
    logger.info(f"Updating task with ID: {task_id}")
    if updated.id != task_id:
        logger.warning(f"Task update rejected: body id {updated.id} != path id {task_id}.")
        raise HTTPException(status_code=400, detail="Task id mismatch")
    try:
        task = repo.update(task_id, updated.model_dump(exclude={"id"}))
    except RecordNotFound:
        logger.warning(f"Task with ID: {task_id} not found for update.")
        raise HTTPException(status_code=404, detail="Task not found")
    except SQLAlchemyError as e:
        logger.error(f"Error updating task {task_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not update task.",
        )
    logger.info(f"Task (ID: {task_id}) updated successfully.")
    return task


@app.delete("/tarefas/{task_id}", response_model=TaskResponse, summary="Delete a task by ID")
def delete_task(task_id: int, repo: Repository[Task] = Depends(get_repository)):
    """
    Deletes a task and returns the deleted record, or 404 if it does not exist.
    """
    logger.info(f"Attempting to delete task with ID: {task_id}")
    try:
        task = TaskResponse.model_validate(repo.find_by_id(task_id))
        repo.delete(task_id)
    except RecordNotFound:
        logger.warning(f"Task with ID: {task_id} not found for deletion.")
        raise HTTPException(status_code=404, detail="Task not found")
    except SQLAlchemyError as e:
        logger.error(f"Error deleting task {task_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while deleting the task.",
        )
    logger.info(f"Task (ID: {task_id}) deleted successfully.")
    return task


def run():
    uvicorn.run(app, host=server_config.APP_HOST, port=server_config.APP_PORT)


if __name__ == "__main__":
    run()
