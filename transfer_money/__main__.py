#!/usr/bin/env python3
"""Main entry point for the transfer money demo"""

import sys

from transfer_money.app import run
from transfer_money.config import get_config
from transfer_money.exceptions import TransferError
from transfer_money.logging_config import setup_logging


def main() -> int:
    """Run the demo scenario"""
    config = get_config()
    setup_logging(config.log_level, "transfer_money", config.log_format)

    try:
        run(config)
    except TransferError as e:
        print(f"Transfer failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
