"""Location rewrite rules: ordered regex patterns and their replacements."""

from fileswitch.rules.models import MAPPING_PREFIX, Rule, RuleSet
from fileswitch.rules.rewriter import LocationRewriter
from fileswitch.rules.template import GroupRef, expand_template, parse_template

__all__ = [
    "MAPPING_PREFIX",
    "Rule",
    "RuleSet",
    "LocationRewriter",
    "GroupRef",
    "parse_template",
    "expand_template",
]
