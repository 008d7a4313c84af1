class FuelValidatorException(Exception):
    """Base exception for validator errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidEventError(FuelValidatorException):
    """Input handed to the engine breaks the call contract."""

    def __init__(self, field_name: str, reason: str, details: dict | None = None) -> None:
        super().__init__(f"Invalid input '{field_name}': {reason}", details)
        self.field_name = field_name
        self.reason = reason


class PolicyNotFoundError(FuelValidatorException):
    """No policy is configured for the requested company."""

    def __init__(self, company_id: str) -> None:
        super().__init__(
            f"No fuel policy configured for company '{company_id}'",
            details={"company_id": company_id},
        )
        self.company_id = company_id


class PolicyLoadError(FuelValidatorException):
    """Policy source could not be read or parsed."""

    pass


class DuplicateThresholdError(FuelValidatorException):
    """A vehicle would end up with more than one active threshold."""

    def __init__(self, vehicle_id: str) -> None:
        super().__init__(
            f"Vehicle '{vehicle_id}' already has an active threshold",
            details={"vehicle_id": vehicle_id},
        )
        self.vehicle_id = vehicle_id
