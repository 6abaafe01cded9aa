class LeadEngineError(Exception):
    """Base class for all lead-engine domain exceptions.

    Every custom exception in this module inherits from here so that a
    single ``except LeadEngineError`` clause can catch any domain error.
    """

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(detail)


class InvalidLeadDataError(LeadEngineError):
    """Raised when an ingested lead row lacks a required field."""

    def __init__(self, detail: str = "Invalid lead data"):
        super().__init__(detail)


class OwnerNotFoundError(LeadEngineError):
    """Raised when a manual reassignment names an owner outside the roster."""

    def __init__(self, detail: str = "Owner not found"):
        super().__init__(detail)
