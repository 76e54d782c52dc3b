# -*- coding: utf-8 -*-

from ..listener import StatusListener
from ..status import describe
from ..util import getLogger


LOGGER = getLogger(__name__)


class StatusDisplay(StatusListener):
    """
    Logs the system status for the operator.
    """

    def __init__(self, security_service):
        self.security_service = security_service
        self.current_status = None
        self.cat_in_view = False
        security_service.add_status_listener(self)
        self.notify(security_service.get_alarm_status())

    def notify(self, status):
        presentation = describe(status)
        self.current_status = presentation.description
        LOGGER.info("System status: %s", presentation.description)

    def cat_detected(self, cat_detected):
        self.cat_in_view = cat_detected
        if cat_detected:
            LOGGER.info("A cat is in view of the camera")
        else:
            LOGGER.debug("No cat in view")

    def sensor_status_changed(self):
        self.notify(self.security_service.get_alarm_status())
