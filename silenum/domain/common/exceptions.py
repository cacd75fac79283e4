"""Errors raised by domain objects and use cases."""


class DomainError(Exception):
    """Root of the domain error hierarchy; ``details`` carries structured context."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} - {self.details}"


class ValidationError(DomainError):
    """A field value breaks a rule checked when the object is built."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        candidates = {"field": field, "value": value}
        super().__init__(message, {k: v for k, v in candidates.items() if v is not None})
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """No row exists for the requested id, or it is hidden from the caller."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(
            f"{entity_type} with id {entity_id} not found",
            {"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """An operation would link objects that must stay apart, e.g. across users."""

    def __init__(self, rule: str, message: str | None = None) -> None:
        super().__init__(message or f"Business rule violated: {rule}", {"rule": rule})
        self.rule = rule
