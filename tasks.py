"""Main invoke tasks file. Use `inv --list` to see available tasks."""

from invoke import Collection, Context, task


@task(name="lint")
def lint(ctx: Context) -> None:
    """Run linting (no fixes) - for CI."""
    ctx.run("uv run ruff check")
    ctx.run("uv run ruff format --check")


@task(name="format")
def format_and_check(ctx: Context) -> None:
    """Format code using ruff - for local dev."""
    ctx.run("uv run ruff check src tests --fix")
    ctx.run("uv run ruff format src tests")


@task(name="test")
def run_tests(ctx: Context, pattern: str | None = None) -> None:
    """Run tests.

    Args:
        pattern: Optional pytest -k expression.
    """
    selector = f" -k '{pattern}'" if pattern else ""
    ctx.run(f"uv run pytest{selector}")


@task(help={"path": "Directory to scan"})
def detect(ctx: Context, path: str) -> None:
    """Run the detector on a directory."""
    ctx.run(f"uv run coreapp-detect -v {path}", warn=True)


ns = Collection()
ns.add_task(detect)
ns.add_collection(Collection(lint, format_and_check, run_tests), name="dev")
