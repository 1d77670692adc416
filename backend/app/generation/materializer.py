"""Persist an ArtifactSet as a project directory on disk.

Layout: <base_dir>/<slug>/index.html, style.css and, when the script is
non-empty, script.js. Existing projects with the same slug are overwritten.
"""

import asyncio
import re
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from app.core.exceptions import DirectoryCreateFailure, FileWriteFailure
from app.generation.extractor import ArtifactSet, replace_lone_surrogates

logger = structlog.get_logger(__name__)

FALLBACK_SLUG: str = "generated-website"
MARKUP_FILENAME: str = "index.html"
STYLESHEET_FILENAME: str = "style.css"
SCRIPT_FILENAME: str = "script.js"

_NON_ALNUM_RUN_RE = re.compile(r"[^a-z0-9]+")


@dataclass
class ProjectRecord:
    """A materialized project directory and the files written into it."""

    slug: str
    path: Path
    files: list[Path] = field(default_factory=list)


def slugify(text: str) -> str:
    """Derive a filesystem-safe project name from free text.

    >>> slugify("My Cool Site!!")
    'my-cool-site'
    """
    slug = _NON_ALNUM_RUN_RE.sub("-", text.lower()).strip("-")
    return slug or FALLBACK_SLUG


def _write_text(path: Path, content: str) -> None:
    path.write_text(replace_lone_surrogates(content), encoding="utf-8")


async def materialize(description: str, artifacts: ArtifactSet, base_dir: Path | str) -> ProjectRecord:
    """Create the project directory and write each artifact into it.

    Writes run sequentially off the event loop. A failed write does not stop
    the remaining ones, and nothing is rolled back.

    Raises:
        DirectoryCreateFailure: the project directory could not be created.
            No files are written in that case.
        FileWriteFailure: one or more files could not be written. Lists only
            the failed paths.
    """
    slug = slugify(description)
    project_path = Path(base_dir) / slug

    try:
        await asyncio.to_thread(project_path.mkdir, parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("project_directory_create_failed", path=str(project_path), error=str(exc))
        raise DirectoryCreateFailure(str(project_path), str(exc)) from exc

    planned: list[tuple[str, str]] = [
        (MARKUP_FILENAME, artifacts.markup),
        (STYLESHEET_FILENAME, artifacts.stylesheet),
    ]
    if artifacts.script:
        planned.append((SCRIPT_FILENAME, artifacts.script))

    record = ProjectRecord(slug=slug, path=project_path)
    failures: dict[str, str] = {}

    for filename, content in planned:
        target = project_path / filename
        try:
            await asyncio.to_thread(_write_text, target, content)
        except (OSError, UnicodeError) as exc:
            logger.warning("project_file_write_failed", path=str(target), error=str(exc))
            failures[str(target)] = str(exc)
            continue
        record.files.append(target)

    if failures:
        raise FileWriteFailure(failures)

    logger.info("project_materialized", slug=slug, path=str(project_path), files=len(record.files))
    return record
