"""Project registry: opens paths, classifies them and serves their content."""

import threading
import uuid
import zipfile
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from ..utils import log_buffer


class ProjectNotFound(LookupError):
    """Raised when a project id or path does not exist."""


class PageOutOfRange(IndexError):
    """Raised when a page index is past the last page."""


class ProjectType(Enum):
    JAVA = 'Java'
    ANDROID = 'Android'
    FOLDER = 'Folder'
    HEX = 'Hex'


JAVA_SUFFIXES = {'.jar', '.class'}
ANDROID_SUFFIXES = {'.apk'}


def classify_path(path: Path) -> ProjectType:
    """Pick the workspace type for a file or folder."""
    if path.is_dir():
        return ProjectType.FOLDER
    suffix = path.suffix.lower()
    if suffix in JAVA_SUFFIXES:
        return ProjectType.JAVA
    if suffix in ANDROID_SUFFIXES:
        return ProjectType.ANDROID
    return ProjectType.HEX


def total_pages_for(total_size: int, page_size: int) -> int:
    """Number of pages needed to cover total_size (at least one)."""
    if page_size <= 0:
        raise ValueError(f'page_size must be positive, got {page_size}')
    return max(1, -(-total_size // page_size))


@dataclass
class Project:
    """An opened file or folder."""

    path: Path
    type: ProjectType
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    handle: BinaryIO | None = field(default=None, repr=False)

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)

    @property
    def is_archive(self) -> bool:
        return self.type is not ProjectType.FOLDER and zipfile.is_zipfile(self.path)


class ProjectRegistry:
    """Thread-safe store of open projects.

    Page reads arrive from worker threads, so every file access happens
    under the registry lock.
    """

    def __init__(self):
        self._projects: dict[str, Project] = {}
        self._lock = threading.Lock()

    def create_project(self, path: str | Path) -> str:
        """Open a path and return the new project id."""
        resolved = Path(path).expanduser()
        if not resolved.exists():
            raise ProjectNotFound(f'Path does not exist: {resolved}')

        project = Project(path=resolved, type=classify_path(resolved))
        if project.type is not ProjectType.FOLDER:
            project.handle = resolved.open('rb')

        with self._lock:
            self._projects[project.id] = project
        log_buffer.log('Project', f'Opened {project.type.value} project {resolved}')
        return project.id

    def close(self, project_id: str):
        """Forget a project and release its file handle."""
        with self._lock:
            project = self._projects.pop(project_id, None)
            if project and project.handle:
                project.handle.close()
        if project:
            log_buffer.log('Project', f'Closed {project.path}')

    def close_all(self):
        for project_id in list(self._projects):
            self.close(project_id)

    def _get(self, project_id: str) -> Project:
        project = self._projects.get(project_id)
        if project is None:
            raise ProjectNotFound(f'Project not found: {project_id}')
        return project

    def get(self, project_id: str) -> Project:
        with self._lock:
            return self._get(project_id)

    def query_type(self, project_id: str) -> ProjectType:
        return self.get(project_id).type

    def get_path(self, project_id: str) -> Path:
        return self.get(project_id).path

    def list_files(self, project_id: str) -> list[str]:
        """List browsable entries as '/'-separated names."""
        project = self.get(project_id)
        if project.type is ProjectType.FOLDER:
            return sorted(
                p.relative_to(project.path).as_posix()
                for p in project.path.rglob('*')
                if p.is_file()
            )
        if project.is_archive:
            with zipfile.ZipFile(project.path) as archive:
                return sorted(
                    info.filename for info in archive.infolist() if not info.is_dir()
                )
        return [project.name]

    def read_file(self, project_id: str, name: str) -> bytes:
        """Read one entry returned by list_files."""
        project = self.get(project_id)
        if project.type is ProjectType.FOLDER:
            target = (project.path / name).resolve()
            if project.path.resolve() not in target.parents:
                raise ProjectNotFound(f'Entry outside project: {name}')
            if not target.is_file():
                raise ProjectNotFound(f'Entry not found: {name}')
            return target.read_bytes()
        if project.is_archive:
            with zipfile.ZipFile(project.path) as archive:
                try:
                    return archive.read(name)
                except KeyError as e:
                    raise ProjectNotFound(f'Entry not found: {name}') from e
        if name != project.name:
            raise ProjectNotFound(f'Entry not found: {name}')
        return project.path.read_bytes()

    def get_total_size(self, project_id: str) -> int:
        """Size in bytes of a file project."""
        with self._lock:
            project = self._get(project_id)
            if project.handle is None:
                raise ProjectNotFound(f'Project has no file content: {project_id}')
            return Path(project.path).stat().st_size

    def get_total_pages(self, project_id: str, page_size: int) -> int:
        return total_pages_for(self.get_total_size(project_id), page_size)

    def read_page(self, project_id: str, page_index: int, page_size: int) -> bytes:
        """Read one page of a file project; the last page may be short."""
        total_pages = self.get_total_pages(project_id, page_size)
        if page_index < 0 or page_index >= total_pages:
            raise PageOutOfRange(
                f'Page {page_index} out of range (total pages: {total_pages})'
            )
        with self._lock:
            project = self._get(project_id)
            if project.handle is None:
                raise ProjectNotFound(f'Project has no file content: {project_id}')
            project.handle.seek(page_index * page_size)
            return project.handle.read(page_size)


# Global project registry
project_registry = ProjectRegistry()
