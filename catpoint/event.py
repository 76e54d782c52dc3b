# -*- coding: utf-8 -*-
# Events fanned out by the alarm engine to its status listeners

from events import Events


class AlarmSystemEvents(Events):
    __events__ = (
        'alarm_status_changed',
        'cat_detected',
        'sensor_status_changed',
    )
