# -*- coding: utf-8 -*-
import uuid
from functools import total_ordering

from .errors import InvalidSensorError
from .status import SensorType


@total_ordering
class Sensor(object):
    """
    A named door, window or motion sensor.

    Identity is the generated ``sensor_id``: two sensors sharing a name and a
    type are still distinct, and a sensor loaded back from storage keeps the
    id it was saved with.
    """

    def __init__(self, name, sensor_type, active=False, sensor_id=None):
        if not isinstance(name, str) or not name.strip():
            raise InvalidSensorError("Invalid sensor name {0!r}".format(name))
        self.name = name
        self.sensor_type = SensorType.from_str(sensor_type)
        self.active = bool(active)
        self.sensor_id = sensor_id or str(uuid.uuid4())

    def to_dict(self):
        return {
            'sensor_id': self.sensor_id,
            'name': self.name,
            'sensor_type': str(self.sensor_type),
            'active': self.active
        }

    @staticmethod
    def from_dict(data):
        return Sensor(data['name'], data['sensor_type'],
                      active=data.get('active', False), sensor_id=data.get('sensor_id'))

    def _sort_key(self):
        return (self.name, self.sensor_type.value, self.sensor_id)

    def __eq__(self, other):
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.sensor_id == other.sensor_id

    def __lt__(self, other):
        if not isinstance(other, Sensor):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self):
        return hash(self.sensor_id)

    def __repr__(self):
        return "Sensor(name={0!r}, sensor_type={1}, active={2}, sensor_id={3})".format(
            self.name, self.sensor_type, self.active, self.sensor_id)
