"""
Exceptions raised while building and printing contracts
"""

from typing import Dict


class WizardError(Exception):
    """Base class for all contract wizard errors"""


class OptionsError(WizardError):
    """Invalid user-supplied options, keyed by option field"""

    def __init__(self, messages: Dict[str, str]):
        self.messages = dict(messages)
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in self.messages.items()))


class EmptyIdentifier(OptionsError):
    """Sanitizing a name left no valid identifier characters"""

    def __init__(self, field: str = "name"):
        super().__init__({field: "Identifier is empty or does not have valid characters"})


class DuplicateFinalizedFunction(WizardError):
    """Code was added to a function whose body is already final"""

    def __init__(self, function_name: str, detail: str = "is already finalized"):
        self.function_name = function_name
        super().__init__(f"Function {function_name} {detail}")


class InvalidDocumentationKey(WizardError):
    """A documentation tag key does not match the natspec key pattern"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Invalid natspec key: {key}")


class UnrepresentableNumber(WizardError):
    """A numeric value is not a safe integer"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Number not representable ({value})")


class UnknownValueVariant(WizardError):
    """The value printer received something outside the Value union"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown value type: {type(value).__name__}")


class ConflictingDefinition(WizardError):
    """A named constant or variable was redefined with a different type or value"""

    def __init__(self, name: str, field: str, new: str, existing: str):
        self.name = name
        super().__init__(
            f"Tried to add duplicate {name} with different {field}: {new} instead of {existing}"
        )


class IncompleteComponent(WizardError):
    """A Cairo component lacks the substorage or event it is declared with"""

    def __init__(self, name: str, missing: str):
        self.name = name
        super().__init__(f"Component {name} has no {missing}")


class UnknownComponent(WizardError):
    """A component was looked up before being added"""

    def __init__(self, name: str):
        super().__init__(f"Component {name} has not been added yet")


class UnknownContractKind(WizardError):
    """No builder is registered for a language and contract kind"""

    def __init__(self, language: str, kind: str):
        self.language = language
        self.kind = kind
        super().__init__(f"Unknown contract kind: {language}/{kind}")
