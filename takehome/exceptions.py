"""Custom exceptions for takehome."""


class TakehomeError(Exception):
    """Base exception for paycheck and tax computation errors."""


class InvalidInputError(TakehomeError):
    """Raised when a calculation input fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid input for '{field}': {message}")


class UnknownJurisdictionError(TakehomeError):
    """Raised when a state code is not present in the tax-year tables."""

    def __init__(self, state_code: str):
        self.state_code = state_code
        super().__init__(f"Unknown jurisdiction: {state_code!r}")


class UnknownTaxYearError(TakehomeError):
    """Raised when no reference tables exist for the requested tax year."""

    def __init__(self, year: int, available: list[int]):
        self.year = year
        self.available = available
        years = ", ".join(str(y) for y in available)
        super().__init__(f"No tax tables for {year}. Available: {years}")
