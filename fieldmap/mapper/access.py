"""Access control predicates shared by every mapper entry point."""
from typing import Optional

from fieldmap.schema.models import FieldRule, Scope


def has_scope(rule: FieldRule, scope: Optional[Scope]) -> bool:
    """Unrestricted rules accept any scope; restricted ones only their own tokens."""
    return rule.scopes is None or (scope is not None and scope in rule.scopes)


def can_deserialize(rule: Optional[FieldRule], scope: Optional[Scope]) -> bool:
    """Check if a rule takes part in DTO -> entity conversion for this scope."""
    return rule is not None and not rule.disable_deserialize and has_scope(rule, scope)


def can_serialize(rule: Optional[FieldRule], scope: Optional[Scope]) -> bool:
    """Check if a rule takes part in entity -> DTO conversion for this scope."""
    return rule is not None and not rule.disable_serialize and has_scope(rule, scope)
