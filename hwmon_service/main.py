"""
main.py

Entry point for a one-shot readout. Loads configuration, sets up logging,
discovers every hwmon group, reads each input once and prints one
"<label>: <value><unit>" line per input.
"""


import logging
import sys

from hwmon_service.config_loader import ConfigLoader
from hwmon_service.logging_setup import setup_logging
from hwmon_service.outputs.console_output import ConsoleOutput
from hwmon_service.outputs.logging_output import LoggingOutput
from hwmon_service.outputs.output_manager import OutputManager
from hwmon_service.sensors.registry import Registry
from hwmon_service.telemetry import TelemetryCollector


def build_outputs(config):
    """Instantiate the outputs named in config["outputs"], in order."""
    builders = {
        "console": lambda: ConsoleOutput(show_group=config["show_group"]),
        "logging": LoggingOutput,
    }
    return [builders[name]() for name in config["outputs"]]


def main() -> int:
    """
    Discover sensors and print their current readings.

    Discovery failures (unreadable root or group) propagate; per-reading
    failures are logged and shown as 0.
    """
    bootstrap_logger = logging.getLogger("bootstrap")
    bootstrap_logger.setLevel(logging.INFO)
    if not bootstrap_logger.handlers:
        bootstrap_logger.addHandler(logging.StreamHandler(sys.stderr))

    config = ConfigLoader(logger=bootstrap_logger).as_dict()

    logger = setup_logging(
        log_dir=config["log_dir"],
        log_file_name="hwmon_service.log",
        log_level=config["log_level"],
    )

    with Registry(
        root=config["hwmon_root"],
        skip_failed_groups=config["skip_failed_groups"],
    ) as registry:
        groups = registry.discover_all()
        if not groups:
            logger.warning(f"No hwmon groups found under {config['hwmon_root']}.")

        collector = TelemetryCollector(groups=groups, max_workers=config["max_workers"])
        outputs = OutputManager(build_outputs(config), logger)
        outputs.render(collector.collect())

    return 0


if __name__ == "__main__":
    sys.exit(main())
