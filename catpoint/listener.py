# -*- coding: utf-8 -*-


class StatusListener(object):
    """
    Receiver of alarm status changes and cat detection results.

    ``notify`` and ``cat_detected`` must be implemented. ``sensor_status_changed``
    is optional: it is fired by whoever adds, removes or toggles sensors outside
    of the alarm rules, so that listeners can refresh what they derive from the
    sensor set.
    """

    def notify(self, status):
        raise NotImplementedError()

    def cat_detected(self, cat_detected):
        raise NotImplementedError()

    def sensor_status_changed(self):
        pass
