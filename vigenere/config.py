"""
Settings read from the environment, falling back to a .env file.

The .env file is parsed with dotenv_values, so importing the package never
writes into os.environ. A variable already set in the environment wins.
"""
import os
import sys

from dotenv import dotenv_values, find_dotenv

_TRUTHY = {"1", "true", "yes", "on"}

def _env_flag(name: str, default: bool = False, dotenv: dict = None) -> bool:
    raw = os.getenv(name)
    if raw is None and dotenv:
        raw = dotenv.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY

# Trace output (disabled by default, enabled with VIGENERE_VERBOSE=1)
VERBOSE = _env_flag("VIGENERE_VERBOSE", dotenv=dotenv_values(find_dotenv(usecwd=True)))

def set_verbose(flag: bool):
    global VERBOSE
    VERBOSE = bool(flag)

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)
