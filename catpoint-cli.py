#!/usr/bin/env python3

import argparse
import logging

from configparser import ConfigParser
from catpoint import SecurityService, WebServer, create_repository, getLogger
from catpoint.agents import FakeImageService, StatusDisplay


def parse_arguments():
    arg_parser = argparse.ArgumentParser(description='Home security system watching sensors and a cat camera.')
    arg_parser.add_argument('-c', '--config', help='Path to config file.',
                            default='/etc/catpoint.conf')
    arg_parser.add_argument('-s', '--data_file', help='Path the data file.',
                            default='/var/lib/catpoint/data.json')
    arg_parser.add_argument('-v', '--verbose', help='Enable verbose mode', action='store_true')
    return arg_parser.parse_args()


def setup_logging(debug_mode):
    root_logger = getLogger()
    if debug_mode:
        root_logger.setLevel(logging.DEBUG)
    stdout_format = logging.Formatter(
        "%(asctime)s %(levelname)-7s %(filename)s:%(lineno)-12s %(threadName)-25s %(message)s", "%Y-%m-%d %H:%M:%S")
    stdout_handler = logging.StreamHandler()
    stdout_handler.setFormatter(stdout_format)
    root_logger.addHandler(stdout_handler)
    getLogger("werkzeug").setLevel(logging.WARNING)
    return root_logger


#pylint: disable=invalid-name
if __name__ == "__main__":
    args = parse_arguments()
    logger = setup_logging(debug_mode=args.verbose)

    try:
        with open(args.config) as f:
            cfg = ConfigParser(interpolation=None)
            cfg.read_file(f)
    except Exception as e:
        logger.fatal("Failed reading configuration, got exception {0}".format(e))

    log_level = cfg.get('logging', 'level', fallback='info')
    if not args.verbose:
        logger.setLevel(getattr(logging, log_level.upper()))

    try:
        repository = create_repository(args.data_file, **cfg['repository'])
    except Exception as e:
        logger.fatal("Failed creating repository, got exception {0}".format(e))

    image_service = FakeImageService(**cfg['imageService'])
    security_service = SecurityService(repository, image_service)
    display = StatusDisplay(security_service)
    web_server = WebServer(security_service, **cfg['webServer'])

    try:
        web_server.start().join()
    except KeyboardInterrupt:
        logger.info("Stopping")
