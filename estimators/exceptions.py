"""Custom exceptions for the estimator suite."""


class EstimatorError(Exception):
    """Base exception for estimator errors."""


class TaxYearNotSupportedError(EstimatorError):
    """Raised when a tax-year table has no entry for the requested year."""

    def __init__(self, year: int, table: str):
        self.year = year
        self.table = table
        super().__init__(f"No {table} configured for tax year {year}")


class UnknownSeverityError(EstimatorError):
    """Raised when a severity key is not in the multiplier table."""

    def __init__(self, severity: str):
        self.severity = severity
        super().__init__(f"Unknown injury severity: {severity}")


class UnknownPayFrequencyError(EstimatorError):
    """Raised when a pay frequency is not configured."""

    def __init__(self, frequency: str):
        self.frequency = frequency
        super().__init__(f"Unknown pay frequency: {frequency}")


class UnknownInjuryTypeError(EstimatorError):
    """Raised when an injury-guide lookup misses."""

    def __init__(self, injury_type: str):
        self.injury_type = injury_type
        super().__init__(f"Unknown injury type: {injury_type}")


class InvalidBracketTableError(EstimatorError):
    """Raised when a bracket table breaks the contiguity/ordering invariant."""

    def __init__(self, message: str):
        super().__init__(f"Invalid bracket table: {message}")


class DataValidationError(EstimatorError):
    """Raised when input data fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")
