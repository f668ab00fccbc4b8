class QRConfigurationError(ValueError):
    pass


class VersionOutOfRangeError(QRConfigurationError):
    pass


class UnsupportedEccLengthError(QRConfigurationError):
    pass
