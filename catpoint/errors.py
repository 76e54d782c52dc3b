# -*- coding: utf-8 -*-


class CatpointError(Exception):
    pass


class InvalidStateError(CatpointError):
    """Raised for an alarm, arming or sensor type value that does not exist."""
    pass


class InvalidSensorError(CatpointError):
    pass


class RepositoryError(CatpointError):
    pass


class ConfigurationError(CatpointError):
    pass
