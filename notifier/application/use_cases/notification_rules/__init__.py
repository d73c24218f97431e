"""Use cases for managing notification rules."""

from .create_rule import create_rule
from .defaults import DEFAULT_RULES, seed_default_rules
from .delete_rule import delete_rule
from .get_rule import get_rule
from .list_rules import list_rules
from .update_rule import update_rule

__all__ = [
    "DEFAULT_RULES",
    "create_rule",
    "delete_rule",
    "get_rule",
    "list_rules",
    "seed_default_rules",
    "update_rule",
]
