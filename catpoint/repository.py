# -*- coding: utf-8 -*-
import os
import json
from pathlib import Path
from threading import RLock

from .errors import RepositoryError, ConfigurationError
from .sensor import Sensor
from .status import AlarmStatus, ArmingStatus
from .util import getLogger


LOGGER = getLogger(__name__)


class SecurityRepository(object):
    """
    Storage for the sensors, the alarm status and the arming status.

    The alarm engine treats its repository as the only source of truth and
    never caches any of these values itself.
    """

    def get_sensors(self):
        raise NotImplementedError()

    def add_sensor(self, sensor):
        raise NotImplementedError()

    def remove_sensor(self, sensor):
        raise NotImplementedError()

    def update_sensor(self, sensor):
        raise NotImplementedError()

    def get_alarm_status(self):
        raise NotImplementedError()

    def set_alarm_status(self, alarm_status):
        raise NotImplementedError()

    def get_arming_status(self):
        raise NotImplementedError()

    def set_arming_status(self, arming_status):
        raise NotImplementedError()


class InMemorySecurityRepository(SecurityRepository):

    def __init__(self, sensors=None, alarm_status=AlarmStatus.NO_ALARM,
                 arming_status=ArmingStatus.DISARMED):
        self.lock = RLock()
        self.sensors = {}
        for sensor in sensors or []:
            self.sensors[sensor.sensor_id] = sensor
        self.alarm_status = AlarmStatus.from_str(alarm_status)
        self.arming_status = ArmingStatus.from_str(arming_status)

    def get_sensors(self):
        with self.lock:
            return set(self.sensors.values())

    def get_sensor(self, sensor_id):
        return self.sensors.get(sensor_id)

    def add_sensor(self, sensor):
        with self.lock:
            self.sensors[sensor.sensor_id] = sensor
            self._changed()

    def remove_sensor(self, sensor):
        with self.lock:
            if self.sensors.pop(sensor.sensor_id, None) is None:
                LOGGER.debug("%s is not stored, nothing to remove", sensor)
                return
            self._changed()

    def update_sensor(self, sensor):
        with self.lock:
            self.sensors[sensor.sensor_id] = sensor
            self._changed()

    def get_alarm_status(self):
        return self.alarm_status

    def set_alarm_status(self, alarm_status):
        with self.lock:
            self.alarm_status = alarm_status
            self._changed()

    def get_arming_status(self):
        return self.arming_status

    def set_arming_status(self, arming_status):
        with self.lock:
            self.arming_status = arming_status
            self._changed()

    def _changed(self):
        pass


class JsonFileSecurityRepository(InMemorySecurityRepository):
    """
    In-memory repository that rewrites a JSON data file after every change
    and reloads it on construction.
    """

    def __init__(self, data_file_path):
        super().__init__()
        self.data_file_path = Path(data_file_path)

        if not self.data_file_path.parents[0].exists() or not os.access(str(self.data_file_path.parents[0]), os.W_OK):
            raise RepositoryError("Can not write data file {}".format(str(self.data_file_path)))

        if self.data_file_path.exists():
            self._load()

    def _load(self):
        try:
            with open(str(self.data_file_path)) as data_file:
                data = json.load(data_file)
        except (OSError, ValueError) as ex:
            raise RepositoryError("Can not read data file {0}: {1}".format(self.data_file_path, ex))

        self.alarm_status = AlarmStatus.from_str(data.get('alarm_status', 'NO_ALARM'))
        self.arming_status = ArmingStatus.from_str(data.get('arming_status', 'DISARMED'))
        for sensor_data in data.get('sensors', []):
            sensor = Sensor.from_dict(sensor_data)
            self.sensors[sensor.sensor_id] = sensor
        LOGGER.debug("Loaded %d sensors from %s", len(self.sensors), self.data_file_path)

    def _changed(self):
        data = {
            'alarm_status': str(self.alarm_status),
            'arming_status': str(self.arming_status),
            'sensors': [s.to_dict() for s in sorted(self.sensors.values())]
        }
        tmp_file_path = self.data_file_path.with_name("_" + self.data_file_path.name)
        try:
            with open(str(tmp_file_path), 'w') as data_file:
                json.dump(data, data_file, indent=2)
            os.replace(str(tmp_file_path), str(self.data_file_path))
        except (OSError, TypeError, ValueError) as ex:
            LOGGER.exception("Could not persist state")
            raise RepositoryError("Could not write {0}: {1}".format(self.data_file_path, ex))
        finally:
            if tmp_file_path.exists():
                tmp_file_path.unlink()


def create_repository(data_file, storage="file"):
    """Build the repository named by the ``storage`` configuration option."""
    if storage == "file":
        return JsonFileSecurityRepository(data_file)
    elif storage == "memory":
        return InMemorySecurityRepository()
    raise ConfigurationError("Unsupported repository storage {0}".format(storage))
