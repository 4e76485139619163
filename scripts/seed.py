"""
Seed the database with demo users, ideas, projects and tasks.

Safe to run repeatedly: rows that already exist (matched on their unique
email/title/name) are left untouched.

Usage: python scripts/seed.py
"""
import sys
import os
from datetime import datetime
from sqlmodel import Session, select

# Add current directory to path
sys.path.append(os.getcwd())

from sparkboard.db.session import dispose_engine, get_engine, init_db
from sparkboard.models import Idea, Project, Task, User, UserRole
from sparkboard.core.security import get_password_hash


def _dt(value: str) -> datetime:
    return datetime.fromisoformat(value)


def get_or_create_user(session: Session, email: str, password: str, **fields) -> User:
    user = session.exec(select(User).where(User.email == email)).first()
    if user:
        print(f"User {email} already exists.")
        return user
    user = User(email=email, password=get_password_hash(password), **fields)
    session.add(user)
    session.commit()
    session.refresh(user)
    print(f"Created user {email} (ID: {user.id})")
    return user


def get_or_create_idea(session: Session, title: str, **fields) -> Idea:
    idea = session.exec(select(Idea).where(Idea.title == title)).first()
    if idea:
        return idea
    idea = Idea(title=title, **fields)
    session.add(idea)
    session.commit()
    session.refresh(idea)
    print(f'Created idea "{title}"')
    return idea


def get_or_create_project(session: Session, name: str, **fields) -> Project:
    project = session.exec(select(Project).where(Project.name == name)).first()
    if project:
        return project
    project = Project(name=name, **fields)
    session.add(project)
    session.commit()
    session.refresh(project)
    print(f'Created project "{name}"')
    return project


def get_or_create_task(session: Session, project: Project, title: str, **fields) -> Task:
    task = session.exec(
        select(Task).where(Task.project_id == project.id, Task.title == title)
    ).first()
    if task:
        return task
    task = Task(project_id=project.id, title=title, **fields)
    session.add(task)
    session.commit()
    session.refresh(task)
    print(f'Created task "{title}" in "{project.name}"')
    return task


def seed():
    print("--- Starting Database Seeding ---")
    init_db()

    with Session(get_engine()) as session:
        alice = get_or_create_user(
            session,
            "alice@example.com",
            "alice123",
            user_name="Alice Smith",
            roles=[UserRole.ADMIN.value, UserRole.USER.value],
            bio="Experienced full-stack developer with a focus on web applications.",
        )
        bob = get_or_create_user(
            session,
            "bob@example.com",
            "bob456",
            user_name="Bob Johnson",
            roles=[UserRole.USER.value],
            bio="Product manager, passionate about user experience and data-driven decisions.",
        )

        crm = get_or_create_idea(
            session,
            "New CRM System",
            description="Develop a comprehensive CRM to manage customer interactions and sales pipelines.",
            status="ConvertedToProject",
            tags=["CRM", "Sales", "Internal Tool"],
            priority="High",
            user_id=alice.id,
        )
        get_or_create_idea(
            session,
            "Mobile App for Task Management",
            description="An intuitive mobile application for managing personal and team tasks on the go.",
            status="Draft",
            tags=["Mobile", "Productivity", "MVP"],
            priority="Medium",
            user_id=bob.id,
        )
        get_or_create_idea(
            session,
            "Company Website Redesign",
            description="Modernize the corporate website with a fresh UI, improved performance, and SEO optimization.",
            status="Archived",
            tags=["Website", "Marketing", "UI/UX"],
            priority="High",
            user_id=alice.id,
        )

        ecommerce = get_or_create_project(
            session,
            "E-commerce Platform Relaunch",
            description="Relaunch the existing e-commerce platform with new features and improved user experience.",
            status="InProgress",
            owner_id=alice.id,
            assigned_to_user_ids=[alice.id, bob.id],
            start_date=_dt("2025-07-01T00:00:00"),
            end_date=_dt("2025-12-31T00:00:00"),
            budget=150000.0,
            idea_id=crm.id,
        )
        wiki = get_or_create_project(
            session,
            "Internal Wiki Development",
            description="Build a comprehensive knowledge base for internal company documentation and processes.",
            status="Planning",
            owner_id=bob.id,
            assigned_to_user_ids=[bob.id],
            start_date=_dt("2025-08-01T00:00:00"),
            end_date=_dt("2025-11-30T00:00:00"),
            budget=50000.0,
        )

        get_or_create_task(
            session, ecommerce, "Implement user authentication",
            description="Set up user login, registration, and session management for the new platform.",
            status="InProgress", due_date=_dt("2025-07-15T00:00:00"), assigned_to_id=alice.id,
        )
        get_or_create_task(
            session, ecommerce, "Design product display pages",
            description="Create responsive and appealing layouts for product detail pages.",
            status="Todo", due_date=_dt("2025-07-20T00:00:00"), assigned_to_id=alice.id,
        )
        get_or_create_task(
            session, ecommerce, "Develop payment gateway integration",
            description="Integrate with Stripe for secure payment processing on the e-commerce platform.",
            status="Blocked", due_date=_dt("2025-08-01T00:00:00"), assigned_to_id=bob.id,
        )
        get_or_create_task(
            session, wiki, "Set up basic wiki structure",
            description="Create the initial page hierarchy and navigation for the wiki.",
            status="Todo", due_date=_dt("2025-08-15T00:00:00"), assigned_to_id=bob.id,
        )

    dispose_engine()
    print("--- Seeding finished ---")


if __name__ == "__main__":
    seed()
