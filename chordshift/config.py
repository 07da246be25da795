from chordshift.file.inireader import IniReader


class AppConfig:
    def __init__(self):
        self.log_file = "chordshift.log"
        self.log_level = "INFO"
        self.color_console = True
        self.startup_scripts: list[str] = []
        self.prompt = "> "

    @classmethod
    def from_ini(cls, cfg: IniReader):
        obj = cls()
        if cfg.has("app", "log_file"):
            # empty value turns the log file off
            obj.log_file = cfg.get_str("app", "log_file") or None
        obj.log_level = cfg.get_str("app", "log_level", obj.log_level)
        obj.color_console = cfg.get_bool("app", "color_console", obj.color_console)
        obj.startup_scripts = cfg.get_list("app", "startup_scripts")
        if cfg.has("app", "prompt"):
            # keep a trailing space, configparser strips it
            obj.prompt = cfg.get_str("app", "prompt").rstrip() + " "
        return obj
