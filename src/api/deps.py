from functools import lru_cache

from fastapi import Depends

from src.rules.loader import load_rules, resolve_rules_path
from src.rules.models import Rules
from src.shell.commands import CommandRegistry, build_registry


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.rules_path = resolve_rules_path()


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Commands ---
def get_registry(rules: Rules = Depends(get_rules)) -> CommandRegistry:
    # Stateless: a fresh table per request keeps no state between calls
    return build_registry(enabled=rules.commands.enabled)
