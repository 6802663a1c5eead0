"""
Value translation to contract source literals
"""

from ..core.config import MAX_SAFE_INTEGER, TargetConfig
from ..core.errors import UnknownValueVariant, UnrepresentableNumber
from ..core.models import Lit, Note


class ValueTranslator:
    """Translates Value union members to target-language literal syntax"""

    def __init__(self, config: TargetConfig):
        self.config = config

    def visit(self, value) -> str:
        method = getattr(self, f"visit_{type(value).__name__}", self.generic_visit)
        return method(value)

    def visit_Lit(self, value: Lit) -> str:
        return value.code

    def visit_Note(self, value: Note) -> str:
        inner = self.visit(value.value)
        if self.config.keep_value_notes:
            return f"{inner} /* {value.note} */"
        return inner

    def visit_int(self, value: int) -> str:
        if abs(value) > MAX_SAFE_INTEGER:
            raise UnrepresentableNumber(value)
        return str(value)

    def visit_float(self, value: float) -> str:
        if not value.is_integer() or abs(value) > MAX_SAFE_INTEGER:
            raise UnrepresentableNumber(value)
        return str(int(value))

    def visit_str(self, value: str) -> str:
        return self.config.quote_string(value)

    def generic_visit(self, value) -> str:
        # bool lands here too, it is not a numeric literal
        raise UnknownValueVariant(value)


def print_value(value, config: TargetConfig) -> str:
    """Translate a single value for the given target"""
    return ValueTranslator(config).visit(value)
