"""Exceptions shared across data services, reminders and the API layer."""


class MadFoodError(Exception):
    """Base class for application errors."""


class DataServiceError(MadFoodError):
    """A read or write against the data store failed. Callers show a generic message and keep prior state."""

    def __init__(self, collection: str, message: str):
        super().__init__(f"{collection}: {message}")
        self.collection = collection


class RecordNotFound(MadFoodError):
    def __init__(self, collection: str, record_id: str):
        super().__init__(f"{collection} record '{record_id}' not found")
        self.collection = collection
        self.record_id = record_id


class ReminderNotConfigured(MadFoodError):
    """Profile is missing a phone number or has text reminders disabled."""


class ReminderDispatchError(MadFoodError):
    """The reminder function rejected the message or could not be reached."""
