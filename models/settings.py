# models/settings.py

from dataclasses import dataclass, fields, replace
from models.enums import Language, ThemeName


@dataclass(frozen=True)
class AppSettings:
    """Singleton settings record"""
    language: Language = Language.FA
    theme: ThemeName = ThemeName.LIGHT
    notifications: bool = True

    @property
    def is_dark(self) -> bool:
        return self.theme == ThemeName.DARK

    def merged(self, **partial) -> "AppSettings":
        """Return a copy with the given fields replaced.

        Raises ValueError for unknown field names or values outside the
        allowed language/theme sets.
        """
        known = {f.name for f in fields(self)}
        unknown = set(partial) - known
        if unknown:
            raise ValueError(f"Unknown settings fields: {', '.join(sorted(unknown))}")

        changes = {}
        if "language" in partial:
            changes["language"] = Language(_enum_value(partial["language"]))
        if "theme" in partial:
            changes["theme"] = ThemeName(_enum_value(partial["theme"]))
        if "notifications" in partial:
            changes["notifications"] = bool(partial["notifications"])
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "language": self.language.value,
            "theme": self.theme.value,
            "notifications": self.notifications
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        return cls().merged(**data)


def _enum_value(value):
    return getattr(value, "value", value)
