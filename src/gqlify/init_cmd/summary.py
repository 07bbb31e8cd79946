"""Render the human-readable report printed by gqlify init."""

from pathlib import Path

from gqlify.init_cmd.skill_catalog import installed_catalog
from gqlify.templates.template_renderer import render_template

DOC_CATEGORIES = (
    "Architecture & conventions documentation",
    "Security audit guides",
    "Testing patterns & templates",
)

NEXT_STEPS = (
    "Read .claude/README.md for overview",
    "Review .claude/RULES.md for key constraints",
    "Try: /gqlify:generate-module Product",
    "Start building with Claude Code!",
)


def installed_skills(claude_dir) -> list[str]:
    """Return the sorted names of skills/<name>/ directories holding a SKILL.md."""
    skills_dir = Path(claude_dir) / "skills"
    if not skills_dir.is_dir():
        return []
    return sorted(
        path.parent.name
        for path in skills_dir.glob("*/SKILL.md")
        if path.is_file()
    )


def count_skills(claude_dir) -> int:
    return len(installed_skills(claude_dir))


def render_banner() -> str:
    return render_template("init_banner.j2", package=__package__)


def render_copied(result) -> str:
    return render_template(
        "init_copied.j2",
        package=__package__,
        template_dir=result.template_dir,
        file_count=len(result.files),
    )


def render_already_exists(result) -> str:
    return render_template("init_already_exists.j2", package=__package__, target_dir=result.target_dir)


def render_success(result) -> str:
    skills = installed_skills(result.target_dir)
    catalog = installed_catalog(skills)
    commands = [entry.command for entries in catalog.values() for entry in entries]
    width = max((len(command) for command in commands), default=0) + 2
    return render_template(
        "init_success.j2",
        package=__package__,
        skill_count=len(skills),
        doc_categories=DOC_CATEGORIES,
        catalog=catalog,
        width=width,
        next_steps=NEXT_STEPS,
    )


def render_failure(error) -> str:
    return render_template("init_failure.j2", package=__package__, error=error)
