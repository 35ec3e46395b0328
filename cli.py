import asyncio
from pathlib import Path
from typing import Optional

import typer
from sqlalchemy.exc import IntegrityError

from src.core.bases.base_repository import RepositoryError
from src.core.logging import setup_logging

app = typer.Typer(help="CLI for managing the blog admin service.")


# ---------------------------
# Helpers
# ---------------------------
def run(coro):
    """Run a coroutine to completion from a sync command."""
    return asyncio.run(coro)


def fail(message: str):
    print(f"❌ {message}")
    raise typer.Exit(1)


def is_duplicate(error: RepositoryError) -> bool:
    return isinstance(error.__cause__, IntegrityError)


# ---------------------------
# Commands
# ---------------------------
@app.callback()
def main():
    """Configure logging before any command runs."""
    setup_logging()


@app.command()
def init_db():
    """Create all database tables."""
    from src.core.config import settings
    from src.core.database import create_tables

    run(create_tables())
    print(f"✅ Tables created at {settings.ASYNC_DATABASE_URL}")


@app.command()
def create_user(
    email: str,
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, confirmation_prompt=True
    ),
):
    """Create a user. The user matching ADMIN_EMAIL gets admin access."""
    from src.core.config import settings
    from src.apps.accounts.dependencies import get_auth_service

    try:
        user = run(get_auth_service().register_user(email, password))
    except ValueError as e:
        fail(str(e))
    except RepositoryError as e:
        if not is_duplicate(e):
            fail(f"Could not create user: {e}")
        fail(f"A user with the email {email} already exists.")

    role = "admin" if settings.is_admin_email(user.email) else "user"
    print(f"✅ Created {role} {user.email}")


@app.command()
def create_post(
    slug: str,
    title: str = typer.Option(..., "--title", "-t", help="Post title"),
    markdown_file: Path = typer.Option(
        ..., "--markdown-file", "-m", exists=True, dir_okay=False, help="Markdown source file"
    ),
):
    """Create a post from a markdown file."""
    from src.apps.blog.routers.post_router import get_post_service
    from src.apps.blog.schemas.post import PostSubmission
    from src.core.results import Invalid

    submission = PostSubmission(
        intent="create",
        title=title,
        slug=slug,
        markdown=markdown_file.read_text(encoding="utf-8"),
    )
    validation = submission.validate_fields()
    if isinstance(validation, Invalid):
        fail("; ".join(msg for msg in validation.errors.values() if msg))

    try:
        run(get_post_service().create(validation.fields.model_dump()))
    except RepositoryError as e:
        if not is_duplicate(e):
            fail(f"Could not create post: {e}")
        fail(f"A post with the slug '{slug}' already exists.")
    print(f"✅ Created post /posts/{slug}")


@app.command()
def list_posts():
    """List all posts."""
    from src.apps.blog.routers.post_router import get_post_repository

    posts = run(get_post_repository().get_many(limit=1000))
    if not posts:
        print("No posts found.")
        return

    print("📦 Posts:")
    for post in posts:
        print(f"  - {post.slug}: {post.title}")


@app.command()
def runserver(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Enable auto-reload in development"),
    log_level: Optional[str] = typer.Option(None, help="Overrides LOG_LEVEL"),
):
    """Run the API server with uvicorn."""
    import uvicorn

    from src.core.config import settings

    uvicorn.run(
        "src.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=(log_level or settings.LOG_LEVEL).lower(),
    )


if __name__ == "__main__":
    app()

    """
# Create the tables and an admin account
python cli.py init-db
python cli.py create-user admin@example.com

# Add a post from a file and check it is there
python cli.py create-post hello-world -t "Hello, World" -m hello.md
python cli.py list-posts

# Serve
python cli.py runserver --reload
    """
