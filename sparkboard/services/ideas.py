"""
Idea Service

CRUD for ideas, always scoped to the owning user, plus promotion of an idea
into a project.
"""
from typing import List

from sqlmodel import Session, select

from sparkboard.core.errors import NotFound, ValidationError
from sparkboard.core.log import logger
from sparkboard.models.idea import Idea, IdeaStatus
from sparkboard.models.project import Project, ProjectStatus
from sparkboard.schemas.idea import IdeaConvert, IdeaCreate, IdeaUpdate
from sparkboard.services.base import apply_changes, save
from sparkboard.services.projects import PROJECT_NAME_CONFLICT

IDEA_TITLE_CONFLICT = "An idea with this title already exists."


def list_ideas(db: Session, owner_id: str) -> List[Idea]:
    statement = (
        select(Idea)
        .where(Idea.user_id == owner_id)
        .order_by(Idea.created_at.desc())
    )
    return list(db.exec(statement).all())


def get_idea(db: Session, idea_id: str, owner_id: str) -> Idea:
    """
    Fetch one idea owned by ``owner_id``.

    Ideas owned by someone else are reported exactly like missing ones.
    """
    idea = db.exec(
        select(Idea).where(Idea.id == idea_id, Idea.user_id == owner_id)
    ).first()
    if not idea:
        logger.info("Idea {} not found for user {}", idea_id, owner_id)
        raise NotFound("Idea not found")
    return idea


def create_idea(db: Session, owner_id: str, idea_in: IdeaCreate) -> Idea:
    idea = Idea(
        title=idea_in.title,
        description=idea_in.description,
        status=(idea_in.status or IdeaStatus.DRAFT).value,
        tags=idea_in.tags or [],
        priority=idea_in.priority.value if idea_in.priority else None,
        user_id=owner_id,
    )
    return save(db, idea, IDEA_TITLE_CONFLICT)


def update_idea(db: Session, idea_id: str, owner_id: str, idea_in: IdeaUpdate) -> Idea:
    """
    Apply a partial update.

    Raises:
        ValidationError: If the body carries no fields
        NotFound: If the idea does not exist or belongs to another user
        Conflict: If the new title is already used by another idea
    """
    changes = idea_in.model_dump(exclude_unset=True, mode="json")
    if not changes:
        raise ValidationError("No fields provided for update")

    idea = get_idea(db, idea_id, owner_id)
    apply_changes(idea, changes)
    return save(db, idea, IDEA_TITLE_CONFLICT)


def delete_idea(db: Session, idea_id: str, owner_id: str) -> None:
    idea = get_idea(db, idea_id, owner_id)

    # Projects promoted from this idea keep existing without the back-reference
    linked = db.exec(select(Project).where(Project.idea_id == idea.id)).all()
    for project in linked:
        project.idea_id = None
        db.add(project)
    db.flush()

    db.delete(idea)
    db.commit()
    logger.info("Deleted idea {}", idea_id)


def convert_idea_to_project(
    db: Session, idea_id: str, owner_id: str, convert_in: IdeaConvert
) -> Project:
    """
    Promote an idea into a new project owned by the same user.

    The project takes the idea's title and description unless overridden and
    keeps a reference to the idea, which is marked ConvertedToProject.
    """
    idea = get_idea(db, idea_id, owner_id)

    name = (convert_in.name or "").strip() or idea.title
    project = Project(
        name=name,
        description=convert_in.description if convert_in.description is not None else idea.description,
        status=(convert_in.status or ProjectStatus.PLANNING).value,
        owner_id=owner_id,
        idea_id=idea.id,
    )
    apply_changes(idea, {"status": IdeaStatus.CONVERTED_TO_PROJECT.value})
    db.add(idea)

    # Both rows are written in one commit
    project = save(db, project, PROJECT_NAME_CONFLICT)
    logger.info("Converted idea {} into project {}", idea_id, project.id)
    return project
