class PasswordMeterError(Exception):
    """Base class for passmeter errors."""


class DictionaryLoadError(PasswordMeterError):
    """The common-password list could not be read. Fatal at startup."""
