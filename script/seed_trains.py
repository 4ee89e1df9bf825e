#!/usr/bin/env python3
"""
Train Seed Script
Populate trains.json with sample trains through the catalog upsert

Usage:
    python -m script.seed_trains

Existing trains with the same id keep their seat grid, so re-running is safe.
"""

import sys

from src.platform.config.di import container, setup
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger


SAMPLE_TRAINS = [
    {
        'train_id': 'bacs123',
        'train_no': '12345',
        'stations': ['bangalore', 'jaipur', 'delhi'],
        'station_times': {'bangalore': '13:50:00', 'jaipur': '19:00:00', 'delhi': '23:30:00'},
        'rows': 4,
        'cols': 6,
    },
    {
        'train_id': 'mum456',
        'train_no': '45678',
        'stations': ['mumbai', 'pune', 'hyderabad', 'chennai'],
        'station_times': {
            'mumbai': '06:10:00',
            'pune': '09:25:00',
            'hyderabad': '17:40:00',
            'chennai': '23:55:00',
        },
        'rows': 5,
        'cols': 4,
    },
    {
        'train_id': 'del789',
        'train_no': '78901',
        'stations': ['delhi', 'agra', 'bhopal', 'bangalore'],
        'station_times': {
            'delhi': '07:00:00',
            'agra': '09:15:00',
            'bhopal': '15:30:00',
            'bangalore': '08:45:00',
        },
        'rows': 3,
        'cols': 4,
    },
]


def main() -> int:
    setup()
    upsert_train_use_case = container.upsert_train_use_case()
    for train_data in SAMPLE_TRAINS:
        try:
            train = upsert_train_use_case.execute(**train_data)
        except CustomBaseError as e:
            Logger.base.error(f'❌ [SEED] {train_data["train_id"]}: {e.message}')
            return 1
        print(f'Seeded {train.train_info}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
