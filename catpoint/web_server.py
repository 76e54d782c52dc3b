# -*- coding: utf-8 -*-

from flask import Flask, request, Response, jsonify

from .errors import CatpointError
from .sensor import Sensor
from .status import describe
from .util import getLogger, run_async, str_to_bool


LOGGER = getLogger(__name__)


class WebServer(object):
    """
    HTTP control panel: arming, sensor management and camera image upload.
    """

    def __init__(self, security_service, port=3000, auth_username=None, auth_password=None):
        self.security_service = security_service
        self.port = int(port)
        self.auth_username = auth_username or None
        self.auth_password = auth_password
        self.app = Flask(".".join(__name__.split(".")[:-1]))
        self.app.register_error_handler(CatpointError, self.handle_error)
        self._add_routes()

    def _add_routes(self):
        self.add_route("/status", "status", self.get_status, methods=["GET"])
        self.add_route("/arming", "arming", self.set_arming, methods=["PUT"])
        self.add_route("/sensors", "sensors", self.get_sensors, methods=["GET"])
        self.add_route("/sensors", "add_sensor", self.add_sensor, methods=["POST"])
        self.add_route("/sensors/<sensor_id>", "remove_sensor", self.remove_sensor, methods=["DELETE"])
        self.add_route("/sensors/<sensor_id>/active", "sensor_active", self.set_sensor_active, methods=["PUT"])
        self.add_route("/camera/image", "camera_image", self.process_image, methods=["POST"])

    def check_auth(self, username, password):
        """This function is called to check if a username /
        password combination is valid.
        """
        return username == self.auth_username and password == self.auth_password

    def add_route(self, route, route_name, handler, **kwargs):
        self.app.add_url_rule(route, route_name, self.basic_auth_decorate(handler), **kwargs)

    def basic_auth_decorate(self, handler):

        def basic_auth_decorated(*args, **kwargs):
            if self.auth_username is None:
                return handler(*args, **kwargs)
            auth = request.authorization
            if not auth or not self.check_auth(auth.username, auth.password):
                LOGGER.debug("Not authenticated")
                return Response(
                    'Could not verify your access level for that URL.\n'
                    'You have to login with proper credentials', 401,
                    {'WWW-Authenticate': 'Basic realm="Login Required"'})
            return handler(*args, **kwargs)
        return basic_auth_decorated

    def handle_error(self, error):
        LOGGER.debug("Rejected request: %s", error)
        return jsonify(error=str(error)), 400

    def _status_document(self):
        alarm_status = self.security_service.get_alarm_status()
        arming_status = self.security_service.get_arming_status()
        return {
            'alarm_status': str(alarm_status),
            'alarm_description': describe(alarm_status).description,
            'arming_status': str(arming_status),
            'arming_description': describe(arming_status).description,
            'cat_visible': self.security_service.is_cat_visible()
        }

    def _json_body(self, *fields):
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return None
        if any(field not in body for field in fields):
            return None
        return body

    def _find_sensor(self, sensor_id):
        return next((s for s in self.security_service.get_sensors() if s.sensor_id == sensor_id), None)

    def get_status(self):
        return jsonify(self._status_document())

    def set_arming(self):
        body = self._json_body("status")
        if body is None:
            return jsonify(error="Expected a JSON body with a status"), 400
        self.security_service.set_arming_status(body["status"])
        return jsonify(self._status_document())

    def get_sensors(self):
        return jsonify([s.to_dict() for s in sorted(self.security_service.get_sensors())])

    def add_sensor(self):
        body = self._json_body("name", "sensor_type")
        if body is None:
            return jsonify(error="Expected a JSON body with a name and a sensor_type"), 400
        sensor = Sensor(body["name"], body["sensor_type"])
        self.security_service.add_sensor(sensor)
        self.security_service.sensors_changed()
        return jsonify(sensor.to_dict()), 201

    def remove_sensor(self, sensor_id):
        sensor = self._find_sensor(sensor_id)
        if sensor is None:
            return jsonify(error="Unknown sensor {0}".format(sensor_id)), 404
        self.security_service.remove_sensor(sensor)
        self.security_service.sensors_changed()
        return ('', 204)

    def set_sensor_active(self, sensor_id):
        body = self._json_body("active")
        if body is None:
            return jsonify(error="Expected a JSON body with an active flag"), 400
        sensor = self._find_sensor(sensor_id)
        if sensor is None:
            return jsonify(error="Unknown sensor {0}".format(sensor_id)), 404
        self.security_service.change_sensor_activation_status(sensor, str_to_bool(body["active"]))
        self.security_service.sensors_changed()
        return jsonify(sensor.to_dict())

    def process_image(self):
        self.security_service.process_image(request.get_data())
        document = self._status_document()
        document['cat_detected'] = document['cat_visible']
        return jsonify(document)

    @run_async
    def start(self):
        self.app.run(host="0.0.0.0", port=self.port, threaded=True)
