#!/usr/bin/env python3
"""Command-line interface for natbreaks, optimal natural breaks classification."""
import logging
from . import commands


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = commands.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
