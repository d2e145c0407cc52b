#!/usr/bin/env python3
"""WildCSP Main Entry Point.

Usage:
  python main.py solve [FILE] [-i]
  python main.py generate -n N -m M [-i] [--seed S]
  python main.py measure -n N -m M [-k K] [--step-n SN] [--step-m SM] [-r R]
  python main.py algorithms

Common environment variables:
  LOG_LEVEL, LOG_DIRECTORY, LOG_TO_STDOUT, WILDCSP_SEED, WILDCSP_AUTOMATED
"""

from wildcsp.presentation.cli.app import run

if __name__ == "__main__":
    run()
