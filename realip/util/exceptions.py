class ConfigurationError(Exception):
    "Raised by ConfigBuilder.build() when a builder step recorded a violation"

    def __init__(self, msg: str, error: Exception = None):
        super().__init__(msg)
        self.error = error


class UnsupportedHeaderError(ValueError):
    "Raised when the `Forwarded` header is selected as the source header"
    pass


class InvalidTrustedRangeError(ValueError):
    "Raised when a trusted range cannot be parsed as an IP network"
    pass
