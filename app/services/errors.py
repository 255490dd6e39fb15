from dataclasses import dataclass
from typing import Optional


class ServiceError(Exception):
    """Base class for all service layer errors."""

    def message(self) -> str:
        raise NotImplementedError


@dataclass
class NotAuthorizedError(ServiceError):
    action: str
    resource: Optional[str] = None

    def message(self) -> str:
        base = "Not authorized"
        if self.resource:
            base += f" to {self.action} {self.resource}"
        else:
            base += f" to {self.action}"
        return base


@dataclass
class AlreadyExistsError(ServiceError):
    resource: str
    resource_id: Optional[str] = None

    def message(self) -> str:
        return f"{self.resource} already exists" + (f": {self.resource_id}" if self.resource_id else "")


@dataclass
class MissingParameterError(ServiceError):
    parameter: str

    def message(self) -> str:
        return f"Missing '{self.parameter}' query parameter"


@dataclass
class InternalServiceError(ServiceError):
    detail: str

    def message(self) -> str:
        return f"Internal error: {self.detail}"
