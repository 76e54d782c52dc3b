# -*- coding: utf-8 -*-
from enum import Enum
from collections import namedtuple

from .errors import InvalidStateError


class _NamedEnum(Enum):

    def __str__(self):
        return self.value

    @classmethod
    def from_str(cls, a_str):
        """Return the member named ``a_str``; members are returned as is."""
        if isinstance(a_str, cls):
            return a_str
        for name, member in cls.__members__.items():
            if a_str == name:
                return member
        raise InvalidStateError("Invalid {0} {1!r}".format(cls.__name__, a_str))


class AlarmStatus(_NamedEnum):
    NO_ALARM = 'NO_ALARM'
    PENDING_ALARM = 'PENDING_ALARM'
    ALARM = 'ALARM'


class ArmingStatus(_NamedEnum):
    DISARMED = 'DISARMED'
    ARMED_HOME = 'ARMED_HOME'
    ARMED_AWAY = 'ARMED_AWAY'


class SensorType(_NamedEnum):
    DOOR = 'DOOR'
    WINDOW = 'WINDOW'
    MOTION = 'MOTION'


Presentation = namedtuple('Presentation', ['description', 'color'])

PRESENTATIONS = {
    AlarmStatus.NO_ALARM: Presentation("Cool and Good", (120, 200, 30)),
    AlarmStatus.PENDING_ALARM: Presentation("I'm in Danger...", (200, 150, 20)),
    AlarmStatus.ALARM: Presentation("Awooga!", (250, 80, 50)),
    ArmingStatus.DISARMED: Presentation("Disarmed", (120, 200, 30)),
    ArmingStatus.ARMED_HOME: Presentation("Armed - At Home", (190, 180, 50)),
    ArmingStatus.ARMED_AWAY: Presentation("Armed - Away", (170, 30, 150)),
}


def describe(status):
    try:
        return PRESENTATIONS[status]
    except (KeyError, TypeError):
        raise InvalidStateError("No presentation for {0!r}".format(status))
