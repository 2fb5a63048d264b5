"""CLI que imprime el informe de las sesiones de entrenamiento de ejemplo."""

from __future__ import annotations

import argparse

from fitness_tool.demo import sample_trainings
from fitness_tool.logging_setup import get_logger, setup_logging
from fitness_tool.report import read_data

logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Distance, speed and calories of the sample training sessions."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics level, written to stderr (default: WARNING).",
    )
    return parser.parse_args()


def main() -> int:
    """Print one report per sample session.

    Returns:
        Exit code (0 on success).
    """
    ns = parse_args()
    setup_logging(ns.log_level)

    trainings = sample_trainings()
    for training in trainings:
        logger.debug(
            "session_reported",
            kind=type(training).__name__,
            calories_kcal=training.calories_kcal(),
        )
        print(read_data(training))

    logger.info("reports_printed", count=len(trainings))
    return 0
