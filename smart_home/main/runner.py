#!/usr/bin/env python3
"""
Scenario Runner - Main Layer

Command line entry point. Loads settings, builds the container and
runs the requested demonstration scenarios, logging every report line
and the final statistics.

Devices given with ``--device`` are built in the session registry,
switched on for ``--on-for`` seconds and off again, after which the
session statistics are logged.
"""

import argparse
import sys
import time
from typing import List, Optional

from pydantic import ValidationError

from smart_home.application.dtos.device_dto import DeviceCreateDTO
from smart_home.application.use_cases.scenario_use_cases import SCENARIOS
from smart_home.domain.entities.errors import DomainError
from smart_home.main.config import get_settings
from smart_home.main.container import (
    AppContainer,
    init_container,
    simulation_session,
)
from smart_home.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

logger = get_logger(__name__)


def parse_device(value: str) -> DeviceCreateDTO:
    """Parse a ``KIND:ID:NAME:WATTS`` option into a creation DTO."""
    parts = value.split(":")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(
            f"expected KIND:ID:NAME:WATTS, got {value!r}"
        )
    kind, device_id, name, watts = parts
    try:
        return DeviceCreateDTO(
            kind=kind, device_id=device_id, name=name, power_consumption=watts
        )
    except ValidationError as e:
        raise argparse.ArgumentTypeError(
            f"invalid device {value!r}: {e.errors()[0]['msg']}"
        ) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smart-home",
        description="Run smart home device simulation scenarios.",
    )
    parser.add_argument(
        "scenarios",
        nargs="*",
        metavar="SCENARIO",
        help=f"Scenarios to run (default: full). One of: {', '.join(SCENARIOS)}",
    )
    parser.add_argument(
        "--device",
        dest="devices",
        action="append",
        type=parse_device,
        metavar="KIND:ID:NAME:WATTS",
        help="Add a device to the session (repeatable)",
    )
    parser.add_argument(
        "--clone",
        dest="clones",
        action="append",
        metavar="ID",
        help="Copy a session device (repeatable)",
    )
    parser.add_argument(
        "--show",
        action="append",
        metavar="ID",
        help="Log the full status of a session device (repeatable)",
    )
    parser.add_argument(
        "--on-for",
        type=float,
        default=0.0,
        metavar="SECONDS",
        help="How long session devices stay on (default: 0)",
    )
    parser.add_argument(
        "--reset-energy",
        action="store_true",
        help="Zero the session energy total after reporting it",
    )
    return parser


def _run_scenarios(container: AppContainer, names: List[str]) -> None:
    use_case = container.run_scenario_use_case()
    for name in names:
        report = use_case.execute(name)
        logger.info("scenario.report", scenario=report.name, title=report.title)
        for line in report.lines:
            logger.info("scenario.line", scenario=report.name, line=line)
        logger.info(
            "scenario.statistics",
            scenario=report.name,
            **report.statistics.model_dump(exclude={"devices"}),
        )


def _run_home(container: AppContainer, args: argparse.Namespace) -> None:
    create = container.create_device_use_case()
    for dto in args.devices or []:
        create.execute(dto)

    clone = container.clone_device_use_case()
    for device_id in args.clones or []:
        clone.execute(device_id)

    toggle = container.toggle_all_devices_use_case()
    for status in toggle.execute(turn_on=True):
        logger.info(
            "home.device_status", device_id=status.device_id, status=status.status
        )

    get_device = container.get_device_by_id_use_case()
    for device_id in args.show or []:
        status = get_device.execute(device_id)
        logger.info("home.device_details", **status.model_dump(mode="json"))

    if args.on_for > 0:
        time.sleep(args.on_for)
    toggle.execute(turn_on=False)

    for status in container.get_devices_use_case().execute():
        logger.info(
            "home.device_energy",
            device_id=status.device_id,
            on_time=status.on_time,
            energy_consumed_wh=status.energy_consumed_wh,
        )

    statistics = container.get_energy_statistics_use_case().execute()
    logger.info("home.statistics", **statistics.model_dump(exclude={"devices"}))
    if args.reset_energy:
        container.reset_energy_statistics_use_case().execute()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the scenario runner."""

    args = build_parser().parse_args(argv)
    with_home = bool(args.devices or args.clones or args.show)
    scenarios = args.scenarios or ([] if with_home else ["full"])

    # Basic logging first so that settings errors are reported
    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    init_container(settings)

    try:
        with simulation_session() as container:
            _run_scenarios(container, scenarios)
            if with_home:
                _run_home(container, args)
    except DomainError as e:
        logger.error("runner.failed", error=e.message, details=e.details)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
