"""Command line entry point for the security system."""

import argparse
import sys
from typing import List, Optional

from .config_manager import ConfigManager
from .logging_config import get_logger, setup_logging
from .models.sensor import Sensor
from .models.status import ArmingStatus, SensorType
from .services.cat_detector import create_detector
from .services.exceptions import SecurityServiceError
from .services.listeners import LoggingStatusListener
from .services.security_service import SecurityService
from .services.status_store import SqliteStatusStore

logger = get_logger("cli")

ARM_MODES = {
    "home": ArmingStatus.ARMED_HOME,
    "away": ArmingStatus.ARMED_AWAY,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catpoint", description="Catpoint home security")
    parser.add_argument("--config", default=None, help="Path to JSON config file")
    parser.add_argument("--log-level", default=None, help="Override configured log level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("status", help="Show arming status, alarm status and sensors")

    arm = subparsers.add_parser("arm", help="Arm the system")
    arm.add_argument("mode", choices=sorted(ARM_MODES))

    subparsers.add_parser("disarm", help="Disarm the system")

    add_sensor = subparsers.add_parser("add-sensor", help="Register a sensor")
    add_sensor.add_argument("name")
    add_sensor.add_argument("--type", dest="sensor_type", default=SensorType.DOOR.value,
                            choices=[t.value for t in SensorType])

    remove_sensor = subparsers.add_parser("remove-sensor", help="Unregister a sensor")
    remove_sensor.add_argument("name")

    activate = subparsers.add_parser("activate", help="Mark a sensor active")
    activate.add_argument("name")

    deactivate = subparsers.add_parser("deactivate", help="Mark a sensor inactive")
    deactivate.add_argument("name")

    scan = subparsers.add_parser("scan", help="Check an image file for cats")
    scan.add_argument("image")

    return parser


def print_status(service: SecurityService) -> None:
    arming = service.get_arming_status()
    alarm = service.get_alarm_status()
    print(f"Arming status: {arming.description}")
    print(f"Alarm status:  {alarm.description}")
    sensors = sorted(service.get_sensors())
    if not sensors:
        print("No sensors registered")
    for sensor in sensors:
        state = "Active" if sensor.active else "Inactive"
        print(f"  {sensor.name:<20} {sensor.sensor_type.value:<8} {state}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config_manager = ConfigManager(args.config)
    config = config_manager.get_config()
    setup_logging(args.log_level or config.log_level, config.log_dir)

    if not config_manager.validate_config():
        logger.error(f"Invalid configuration in {config_manager.config_path}")
        return 1

    try:
        store = SqliteStatusStore(config.database_path)
        detector = create_detector(config.detector_backend,
                                   cascade_path=config.cascade_path,
                                   scale_factor=config.scale_factor,
                                   min_neighbors=config.min_neighbors)
        service = SecurityService(store, detector, config.confidence_threshold,
                                  cat_detected=store.get_cat_detected())
        service.add_status_listener(LoggingStatusListener())

        if args.command == "arm":
            service.set_arming_status(ARM_MODES[args.mode])
        elif args.command == "disarm":
            service.set_arming_status(ArmingStatus.DISARMED)
        elif args.command == "add-sensor":
            service.add_sensor(Sensor(args.name, SensorType(args.sensor_type)))
        elif args.command == "remove-sensor":
            service.remove_sensor(store.get_sensor(args.name))
        elif args.command == "activate":
            service.set_sensor_activation(store.get_sensor(args.name), True)
        elif args.command == "deactivate":
            service.set_sensor_activation(store.get_sensor(args.name), False)
        elif args.command == "scan":
            contains_cat = service.process_image(args.image)
            store.set_cat_detected(contains_cat)
            print("Cat detected" if contains_cat else "No cat detected")

        print_status(service)
        return 0

    except SecurityServiceError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
