"""
Tradier Trading Bot - Main Entry Point
Usage: python start.py [paper|live] [--check] [--env-file PATH] [--log-level LEVEL]
       python start.py paper --check   # Load sandbox config and verify the token
       python start.py live            # Load config pointed at the live API
"""

import argparse
import asyncio
import logging
import sys

from config.tradier import endpoint_for_mode
from core.config_loader import MissingCredential, load_from_env
from utils.logging_setup import install_token_redaction, setup_logging
from utils.tradier_api import TradierAPI

logger = logging.getLogger("start")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tradier trading bot")
    parser.add_argument("mode", nargs="?", default="paper", choices=["paper", "live"],
                        help="paper uses the sandbox API (default), live uses real money")
    parser.add_argument("--check", action="store_true",
                        help="verify the access token against the selected endpoint")
    parser.add_argument("--env-file", default=None,
                        help="path to a .env file (default: ./.env)")
    parser.add_argument("--log-level", default="INFO",
                        help="log level, e.g. INFO or DEBUG")
    parser.add_argument("--log-file", default=None,
                        help="optional rotating log file, e.g. logs/bot.log")
    parser.add_argument("--yes", action="store_true",
                        help="skip the live trading confirmation prompt")
    return parser


def confirm_live_mode() -> bool:
    """Ask for explicit confirmation before pointing at the live API"""
    print("⚠️  LIVE TRADING MODE WARNING ⚠️")
    print("=" * 40)
    print("• You are about to use the LIVE Tradier API with REAL MONEY")
    print("• Make sure you have tested thoroughly in paper mode")
    print("=" * 40)
    print()
    response = input("Type 'YES' to confirm live trading: ").strip()
    return response == 'YES'


async def run(args) -> int:
    try:
        config = await load_from_env(args.env_file)
    except MissingCredential as e:
        logger.error(f"Failed to load configuration: {e}")
        return 1

    install_token_redaction(config.access_token)

    if args.mode == 'live':
        config.endpoint = endpoint_for_mode('live')
    logger.info(f"Mode: {args.mode.upper()} - endpoint {config.endpoint}")

    if args.check:
        api = TradierAPI(config)
        if not await asyncio.to_thread(api.test_connection):
            logger.error("Failed to connect to API")
            return 1

    # TODO: hand the config to the trading loop once it exists (connect -> run -> shutdown)
    logger.info("Configuration ready. Trading loop is not available yet; exiting.")
    return 0


def main_entry(argv=None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    if args.mode == 'live' and not args.yes and not confirm_live_mode():
        print("❌ Live trading cancelled")
        return 1

    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        print("\n⌨️  Bot stopped by user")
        return 130


if __name__ == "__main__":
    sys.exit(main_entry())
