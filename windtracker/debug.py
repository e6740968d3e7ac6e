# ABOUTME: Debug logging helper gated on the DEBUG config flag
# ABOUTME: Prints tagged trace lines to stdout so they show up in container logs

from windtracker.config import Config


def debug_log(message: str, tag: str = "DEBUG") -> None:
    """Print a tagged debug line when DEBUG is enabled."""
    if Config.DEBUG:
        print(f"[{tag}] {message}", flush=True)
