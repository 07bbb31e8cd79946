"""Copy the bundled .claude template tree into a project directory."""

import shutil
from dataclasses import dataclass, field
from pathlib import Path

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "claude-template"

CLAUDE_DIR_NAME = ".claude"

CREATED = "created"
ALREADY_EXISTS = "already_exists"


class InitError(Exception):
    """Raised when the template tree cannot be installed."""


class TemplateNotFoundError(InitError):
    """Raised when the bundled template directory is missing."""


@dataclass(frozen=True)
class InitResult:
    status: str
    target_dir: Path
    template_dir: Path
    files: tuple[str, ...] = field(default_factory=tuple)

    @property
    def created(self) -> bool:
        return self.status == CREATED


def list_files(root) -> tuple[str, ...]:
    """Return the sorted POSIX-style relative paths of all files under root."""
    root = Path(root)
    return tuple(sorted(
        path.relative_to(root).as_posix()
        for path in root.rglob("*")
        if path.is_file()
    ))


def init_claude_dir(target_dir=".", *, template_dir=None) -> InitResult:
    """Copy template_dir (the bundled tree by default) into target_dir/.claude.

    An existing .claude entry of any kind is left untouched and reported
    with status ALREADY_EXISTS, before template_dir is looked at. Files are copied byte-for-byte; nothing in
    the markdown is substituted.

    Raises:
        TemplateNotFoundError: If template_dir is not a directory
        InitError: If the copy fails; the destination may be partially written
    """
    template_dir = Path(template_dir) if template_dir is not None else TEMPLATE_DIR
    destination = Path(target_dir) / CLAUDE_DIR_NAME

    if destination.exists() or destination.is_symlink():
        return InitResult(ALREADY_EXISTS, destination, template_dir)

    if not template_dir.is_dir():
        raise TemplateNotFoundError(f"Template directory not found: {template_dir}")

    try:
        shutil.copytree(template_dir, destination, copy_function=shutil.copy2)
    except OSError as exc:
        raise InitError(f"Failed to copy templates to {destination}: {exc}") from exc

    return InitResult(CREATED, destination, template_dir, list_files(destination))
