"""Highlighted skills shown after init, grouped by category."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SkillEntry:
    name: str
    usage: str
    description: str

    @property
    def command(self) -> str:
        return f"/gqlify:{self.name} {self.usage}".rstrip()


SKILL_CATALOG = {
    "Core Generation": (
        SkillEntry("generate-module", "<Entity>", "Scaffold complete module"),
        SkillEntry("generate-field", "<Module>", "Add DataLoader field"),
        SkillEntry("add-field", "<Module>", "Add entity property"),
    ),
    "Advanced Features": (
        SkillEntry("add-export", "<Module>", "CSV/Excel export"),
        SkillEntry("add-filter", "<Module>", "Advanced filtering"),
        SkillEntry("add-i18n", "<Module>", "Internationalization"),
        SkillEntry("add-pagination", "<Module>", "Paginated responses"),
    ),
    "Code Quality": (
        SkillEntry("validate", "[--fix]", "Validate code patterns"),
        SkillEntry("audit-security", "", "Security audit"),
        SkillEntry("setup", "", "Verify project setup"),
    ),
}


def installed_catalog(skill_names):
    """Return SKILL_CATALOG restricted to skill_names, dropping empty categories."""
    available = set(skill_names)
    catalog = {}
    for category, entries in SKILL_CATALOG.items():
        present = tuple(entry for entry in entries if entry.name in available)
        if present:
            catalog[category] = present
    return catalog
