################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Command line entry point for replaying a recorded rowing session.
"""

import argparse
import logging
import sys
from dataclasses import replace

from nearow.stroke_rate.config.stroke_rate_config import StrokeRateConfig
from nearow.stroke_rate.config.stroke_rate_config import StrokeRateConfigError
from nearow.stroke_rate.config.stroke_rate_params import StrokeRateParams
from nearow.stroke_rate.pipeline.stroke_rate_session import StrokeRateSession
from nearow.stroke_rate.replay.replay_engine import ReplayEngine
from nearow.stroke_rate.replay.replay_engine import ReplayError
from nearow.stroke_rate.replay.replay_engine import load_csv


################################################################################
# Replay entry point
################################################################################


def _parse_args(args=None) -> argparse.Namespace:
    defaults: StrokeRateParams = StrokeRateParams.defaults()

    parser = argparse.ArgumentParser(
        description="Replay a recorded accelerometer CSV through the stroke rate estimator"
    )
    parser.add_argument(
        "recording",
        help="CSV file with t_sec,x,y,z columns",
    )
    parser.add_argument(
        "--sample-rate",
        type=float,
        default=defaults.sampling.sample_rate_hz,
        help="Nominal sampling rate in Hz used to size the sample buffer",
    )
    parser.add_argument(
        "--max-rate",
        type=float,
        default=defaults.estimator.max_rate_spm,
        help="Highest stroke rate in strokes per minute the estimator reports",
    )
    parser.add_argument(
        "--warmup",
        type=float,
        default=defaults.scheduler.warmup_delay_sec,
        help="Seconds of recording before the first estimate",
    )
    parser.add_argument(
        "--period",
        type=float,
        default=defaults.scheduler.recalculation_period_sec,
        help="Seconds between estimates",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    options, _ = parser.parse_known_args(args=args)
    return options


def main(args=None) -> int:
    options = _parse_args(args=args)

    logging.basicConfig(level=logging.DEBUG if options.verbose else logging.INFO)

    defaults: StrokeRateParams = StrokeRateParams.defaults()
    params: StrokeRateParams = defaults.replace(
        sampling=replace(defaults.sampling, sample_rate_hz=options.sample_rate),
        estimator=replace(defaults.estimator, max_rate_spm=options.max_rate),
        scheduler=replace(
            defaults.scheduler,
            warmup_delay_sec=options.warmup,
            recalculation_period_sec=options.period,
        ),
    )

    try:
        config = StrokeRateConfig(params)
        records = load_csv(options.recording)
    except (StrokeRateConfigError, ReplayError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    session = StrokeRateSession(config)
    updates = ReplayEngine(session).run(records)

    print("t_sec,stroke_rate_spm,smoothed_rate_spm,best_lag,sample_rate_hz")
    for update in updates:
        print(
            f"{update.t_sec:.3f},{update.stroke_rate_spm:.2f},"
            f"{update.smoothed_rate_spm:.2f},{update.best_lag},"
            f"{update.sample_rate_hz:.2f}"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
