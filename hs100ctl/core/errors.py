"""Domain-specific errors for hs100ctl."""


class Hs100Error(Exception):
    """Base error for hs100ctl."""


class ConfigurationError(Hs100Error):
    """Base for user errors detected before any network activity."""


class ConfigLoadError(ConfigurationError):
    """Raised when the configuration file cannot be found or read."""


class ConfigValidationError(ConfigurationError):
    """Raised when a configuration file does not conform to schema or semantics."""


class UnknownActionError(ConfigurationError):
    """Raised when an action name is not in the command catalog."""


class DeviceSelectionError(ConfigurationError):
    """Raised when a device name cannot be resolved from the configuration."""


class TransportError(Hs100Error):
    """Base transport error."""


class TransportConnectError(TransportError):
    """Raised when a TCP connection to a plug cannot be established."""


class DecodeError(Hs100Error):
    """Raised when a plug reply cannot be turned into a JSON object."""
