from .util import run_async, getLogger
from .errors import CatpointError, InvalidStateError, InvalidSensorError, RepositoryError, ConfigurationError
from .status import AlarmStatus, ArmingStatus, SensorType, describe
from .sensor import Sensor
from .listener import StatusListener
from .repository import SecurityRepository, InMemorySecurityRepository, JsonFileSecurityRepository, create_repository
from .alarm import SecurityService
from .web_server import WebServer
