"""
Train Booking System - interactive console entry point

Usage:
    python -m src.main [--data-dir PATH]
"""

import argparse
from pathlib import Path
import sys
from typing import Sequence

from dependency_injector import providers
from dependency_injector.wiring import Provide, inject

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container, cleanup, container, setup
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.driving_adapter.cli.booking_shell import BookingShell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='train-booking', description='Train seat booking')
    parser.add_argument(
        '--data-dir',
        type=Path,
        default=None,
        help='Directory holding trains.json and users.json (default: DATA_DIR setting)',
    )
    return parser


@inject
def run_shell(shell: BookingShell = Provide[Container.booking_shell]) -> None:
    shell.run()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.data_dir is not None:
        container.config_service.override(providers.Singleton(Settings, DATA_DIR=args.data_dir))

    container.wire(modules=[__name__])
    try:
        setup()
        run_shell()
    except StorageError as e:
        Logger.base.error(f'❌ [MAIN] {e.message}')
        print(f'Error loading data: {e.message}', file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
    finally:
        container.unwire()
        container.config_service.reset_override()
        cleanup()
    return 0


if __name__ == '__main__':
    sys.exit(main())
