import configparser
from pathlib import Path


class IniReader:
    def __init__(self, path=None):
        self.cfg = configparser.ConfigParser(inline_comment_prefixes=(";", "#"))
        self.cfg.optionxform = str  # preserve case
        self.path = Path(path) if path else None
        self.loaded = bool(self.path) and bool(self.cfg.read(self.path, encoding="utf-8"))

    def has(self, section: str, option: str) -> bool:
        return self.cfg.has_option(section, option)

    def _clean(self, val: str) -> str:
        if val is None:
            return ""
        # cut at first ; or #
        for sep in (";", "#"):
            if sep in val:
                val = val.split(sep, 1)[0]
        return val.strip()

    def get_str(self, section: str, option: str, fallback: str = "") -> str:
        if self.has(section, option):
            return self._clean(self.cfg.get(section, option))
        return fallback

    def get_bool(self, section: str, option: str, fallback: bool = False) -> bool:
        if not self.has(section, option):
            return fallback
        return self.get_str(section, option).lower() in ("1", "yes", "true", "on")

    def get_list(self, section: str, option: str) -> list[str]:
        """Comma separated values, continuation lines allowed."""
        if not self.has(section, option):
            return []
        raw = self.cfg.get(section, option, fallback="")
        joined = raw.replace("\\\n", " ").replace("\n", ",")
        return [t.strip() for t in joined.split(",") if t.strip()]
