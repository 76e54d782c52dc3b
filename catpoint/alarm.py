# -*- coding: utf-8 -*-
from threading import RLock

from .errors import InvalidSensorError
from .event import AlarmSystemEvents
from .status import AlarmStatus, ArmingStatus
from .util import getLogger


LOGGER = getLogger(__name__)

CAT_CONFIDENCE_THRESHOLD = 50.0


class SecurityService(object):
    """
    Alarm engine deciding the alarm status from sensor activations, camera
    images and the arming status.

    All state lives in the repository except whether a cat was seen in the
    last processed image. Every change of alarm status goes through
    ``set_alarm_status`` which persists it and notifies the listeners.
    """

    def __init__(self, repository, image_service):
        self.repository = repository
        self.image_service = image_service
        self.lock = RLock()
        self.events = AlarmSystemEvents()
        self.status_listeners = []
        self.cat_currently_visible = False

    def add_status_listener(self, listener):
        with self.lock:
            if listener in self.status_listeners:
                return
            self.status_listeners.append(listener)
            self.events.alarm_status_changed += listener.notify
            self.events.cat_detected += listener.cat_detected
            sensor_hook = getattr(listener, 'sensor_status_changed', None)
            if sensor_hook is not None:
                self.events.sensor_status_changed += sensor_hook

    def remove_status_listener(self, listener):
        with self.lock:
            if listener not in self.status_listeners:
                return
            self.status_listeners.remove(listener)
            self.events.alarm_status_changed -= listener.notify
            self.events.cat_detected -= listener.cat_detected
            sensor_hook = getattr(listener, 'sensor_status_changed', None)
            if sensor_hook is not None:
                self.events.sensor_status_changed -= sensor_hook

    def set_arming_status(self, arming_status):
        new_status = ArmingStatus.from_str(arming_status)
        with self.lock:
            LOGGER.info("Changing arming status from %s to %s",
                        self.repository.get_arming_status(), new_status)
            if new_status == ArmingStatus.DISARMED:
                self.set_alarm_status(AlarmStatus.NO_ALARM)
            else:
                for sensor in self.repository.get_sensors():
                    if sensor.active:
                        LOGGER.debug("Resetting %s before arming", sensor)
                        sensor.active = False
                        self.repository.update_sensor(sensor)

            self.repository.set_arming_status(new_status)

            if new_status == ArmingStatus.ARMED_HOME and self.cat_currently_visible:
                LOGGER.debug("Armed at home while a cat is in view")
                self.set_alarm_status(AlarmStatus.ALARM)

    def set_alarm_status(self, alarm_status):
        new_status = AlarmStatus.from_str(alarm_status)
        with self.lock:
            LOGGER.info("Changing alarm status from %s to %s",
                        self.repository.get_alarm_status(), new_status)
            self.repository.set_alarm_status(new_status)
            self.events.alarm_status_changed(new_status)

    def change_sensor_activation_status(self, sensor, active):
        if sensor is None:
            raise InvalidSensorError("No sensor given")
        if not isinstance(active, bool):
            raise InvalidSensorError("Invalid active flag {0!r} for {1}".format(active, sensor))
        becomes_active = active

        with self.lock:
            alarm_status = self.repository.get_alarm_status()
            if alarm_status == AlarmStatus.ALARM:
                LOGGER.debug("Alarm is on, %s change does not affect it", sensor)
                self._persist_sensor(sensor, becomes_active)
                return

            was_active = bool(sensor.active)

            if was_active and becomes_active:
                if alarm_status == AlarmStatus.PENDING_ALARM:
                    self.set_alarm_status(AlarmStatus.ALARM)
                self._persist_sensor(sensor, True)
                return

            if not was_active and becomes_active:
                self._handle_sensor_activated()
            elif was_active and not becomes_active:
                self._handle_sensor_deactivated(sensor)

            self._persist_sensor(sensor, becomes_active)

    def process_image(self, image):
        cat = bool(self.image_service.image_contains_cat(image, CAT_CONFIDENCE_THRESHOLD))
        with self.lock:
            self._cat_detected(cat)

    def sensors_changed(self):
        self.events.sensor_status_changed()

    def is_cat_visible(self):
        return self.cat_currently_visible

    def get_alarm_status(self):
        return self.repository.get_alarm_status()

    def get_arming_status(self):
        return self.repository.get_arming_status()

    def get_sensors(self):
        return self.repository.get_sensors()

    def add_sensor(self, sensor):
        if sensor is None:
            raise InvalidSensorError("No sensor given")
        with self.lock:
            self.repository.add_sensor(sensor)

    def remove_sensor(self, sensor):
        if sensor is None:
            raise InvalidSensorError("No sensor given")
        with self.lock:
            self.repository.remove_sensor(sensor)

    def _persist_sensor(self, sensor, active):
        sensor.active = active
        self.repository.update_sensor(sensor)

    def _handle_sensor_activated(self):
        if self.repository.get_arming_status() == ArmingStatus.DISARMED:
            return

        alarm_status = self.repository.get_alarm_status()
        if alarm_status == AlarmStatus.NO_ALARM:
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif alarm_status == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.ALARM)

    def _handle_sensor_deactivated(self, sensor):
        if self.repository.get_alarm_status() != AlarmStatus.PENDING_ALARM:
            return
        # the sensor being deactivated is not written back yet
        if not self._any_sensor_active(ignored=sensor):
            self.set_alarm_status(AlarmStatus.NO_ALARM)

    def _cat_detected(self, cat):
        LOGGER.debug("Cat detected: %s", cat)
        self.cat_currently_visible = cat

        if cat and self.repository.get_arming_status() == ArmingStatus.ARMED_HOME:
            self.set_alarm_status(AlarmStatus.ALARM)
        elif not cat and not self._any_sensor_active():
            self.set_alarm_status(AlarmStatus.NO_ALARM)

        self.events.cat_detected(cat)

    def _any_sensor_active(self, ignored=None):
        return any(s.active for s in self.repository.get_sensors() if s != ignored)
