from enum import Enum


# NOT_FOUND also covers rows the caller is not allowed to see or remove.
class ResponseStatus(str, Enum):
    SUCCESS = "SUCCESS"
    NOT_FOUND = "NOT_FOUND"
