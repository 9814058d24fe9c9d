"""
Console configuration: message catalogue and logging setup.

There are no configuration files and no environment variables.
Everything the console prints comes from a ConsoleMessages instance.
"""

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class ConsoleMessages:
    """
    User-facing text for the command loop.

    Templates use str.format placeholders:
        bad_property:      {value}
        unknown_operation: {raw}
        total_area:        {value}
        total_perimeter:   {value}
        figure_added:      {figure}
    """

    menu: str = (
        "Choose an operation:\n"
        "1) add a figure\n"
        "2) get the total area of all figures\n"
        "3) get the total perimeter of all figures\n"
        "4) exit"
    )
    figure_type_prompt: str = "Enter figure type (1 - Square, 2 - Circle):"
    property_prompt: str = "Enter property value:"
    invalid_figure_type: str = "Invalid figure type."
    invalid_property: str = "Invalid property value."
    bad_property: str = "Bad property value: {value}"
    unknown_operation: str = "Unknown operation: {raw}"
    total_area: str = "Total area of all figures: {value}"
    total_perimeter: str = "Total perimeter of all figures: {value}"
    figure_added: str = "Added {figure}."


DEFAULT_MESSAGES = ConsoleMessages()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING) -> None:
    """Send package logs to stderr so they never mix with console output."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
