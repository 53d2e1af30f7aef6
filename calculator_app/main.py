"""
Main entrypoint used by the launch description and Docker.

This script starts one of the two components:
- service: the calculation service exposing POST /calculate
- frontend: the web form that calls the service and plots the result

Host and port binding come from CALCULATOR_* environment variables.
"""

import argparse
from typing import Literal

from pydantic import BaseModel, ValidationError

from calculator_app.config import Settings, get_settings
from calculator_app.frontend.app import FrontendServer
from calculator_app.server.server import CalculationServer


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    component : Literal["service", "frontend"]
        Component to run in this process.
    """

    component: Literal["service", "frontend"]


def run_service(settings: Settings) -> None:
    """
    Start the calculation service.

    The server blocks in the current process until stopped.
    """
    server = CalculationServer(
        host=settings.service_host,
        port=settings.service_port,
    )
    server.start()


def run_frontend(settings: Settings) -> None:
    """
    Start the frontend.

    The server blocks in the current process until stopped.
    """
    server = FrontendServer(
        host=settings.frontend_host,
        port=settings.frontend_port,
        service_url=settings.calculation_service_url,
    )
    server.start()


def parse_args(argv=None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Argument list, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Calculator web application"
    )

    parser.add_argument(
        "component",
        help="Component to run: 'service' or 'frontend'",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(component=args.component)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv=None) -> None:
    """
    Main function executed by the launch description or Docker.
    """
    cli_args = parse_args(argv)
    settings = get_settings()

    if cli_args.component == "service":
        run_service(settings)
    else:
        run_frontend(settings)


if __name__ == "__main__":
    main()
