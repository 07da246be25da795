#!/usr/bin/env python3
"""
main.py - Entry point for the chordshift console
"""

import argparse
import logging
from pathlib import Path

from chordshift.config import AppConfig
from chordshift.file.inireader import IniReader
from chordshift.logger.logger import level_from_name, setup_logger
from chordshift.profile import Profile

DEFAULT_CONFIG_FILE = "chordshift.ini"


# ----------------------------------------------------------------------
# Console loop
# ----------------------------------------------------------------------
def run_console(registry, prompt: str, log):
    log.info("Type HELP for a list of commands, QUIT to leave.")
    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if line.strip().upper() == "QUIT":
            break
        registry.process_line(line)


# ----------------------------------------------------------------------
# Main runner
# ----------------------------------------------------------------------
def run_main(log, app_cfg: AppConfig, scripts: list[str]):
    profile = Profile(log)
    registry = profile.build_registry()

    for script in scripts:
        if not registry.load_file(script):
            log.warning(f"Startup script {script} skipped")

    try:
        run_console(registry, app_cfg.prompt, log)
    finally:
        registry.close()


def main():
    parser = argparse.ArgumentParser(description="chordshift controller binding console")
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=DEFAULT_CONFIG_FILE,
        help=f"INI config file (default: {DEFAULT_CONFIG_FILE}, optional)",
    )
    parser.add_argument(
        "--script",
        "-s",
        action="append",
        default=None,
        help="Command script to run at startup, replaces startup_scripts from the INI",
    )
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
    args = parser.parse_args()

    cfg = IniReader(args.config)
    app_cfg = AppConfig.from_ini(cfg)
    console_level = logging.WARNING if args.quiet else level_from_name(app_cfg.log_level)

    log = setup_logger(
        "chordshift",
        logfile=app_cfg.log_file,
        console_level=console_level,
        color_console=app_cfg.color_console,
    )
    log.info("Starting chordshift")
    if cfg.loaded:
        log.info(f"Config: {Path(args.config).resolve()}")
    else:
        log.info(f"No config file at {args.config}, using defaults")

    run_main(log, app_cfg, args.script if args.script else app_cfg.startup_scripts)


if __name__ == "__main__":
    main()
