"""
CLI for trying the value object contract: dedupe, compare.
Both commands go through Tag.__eq__ and Tag.__hash__ via Python's set and hash().
"""
from typing import List, Optional

import typer

from poeaa.config import Config
from poeaa.domain import Tag
from poeaa.logging import configure_structlog, get_logger

app = typer.Typer(help="poeaa CLI: value-equality demos for Tag.")


@app.callback()
def setup(
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Override POEAA_LOG_LEVEL"),
) -> None:
    """Load config from env and configure logging."""
    config = Config.from_env()
    configure_structlog(level=log_level or config.log_level, fmt=config.log_format)


@app.command()
def dedupe(
    texts: Optional[List[str]] = typer.Argument(None, help="Tag texts, e.g. work home work"),
) -> None:
    """Print each distinct tag once, in first-seen order."""
    log = get_logger("cli")
    if not texts:
        typer.echo("No tags given. Example: poeaa dedupe work home work", err=True)
        raise typer.Exit(1)

    seen: set[Tag] = set()
    for text in texts:
        tag = Tag(text)
        if tag in seen:
            log.debug("tag_duplicate", text=text, hash=hash(tag))
            continue
        seen.add(tag)
        log.debug("tag_added", text=text, hash=hash(tag))
        typer.echo(str(tag))

    typer.echo(f"{len(seen)} distinct of {len(texts)}")


@app.command()
def compare(
    left: str = typer.Argument(..., help="Text of the first tag"),
    right: str = typer.Argument(..., help="Text of the second tag"),
) -> None:
    """Show whether two tags are equal and their hashes."""
    a, b = Tag(left), Tag(right)
    equal = a == b
    get_logger("cli").debug("tags_compared", left=left, right=right, equal=equal)
    typer.echo(f"equal: {str(equal).lower()}")
    typer.echo(f"hash({left}): {hash(a)}")
    typer.echo(f"hash({right}): {hash(b)}")


def main() -> None:
    """Entry point for the poeaa console command."""
    app()


if __name__ == "__main__":
    main()
