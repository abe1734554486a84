"""Entrypoint: run the HireBot API or inspect its AI provider configuration."""

from __future__ import annotations

import argparse

from pathlib import Path
import sys

import uvicorn
from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from hirebot.app import create_app
from hirebot.config import configure_logging, load_settings
from hirebot.llm.resolver import not_configured_message, resolve_provider_config


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="HireBot interview and resume API")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings.yaml")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("serve", help="Run the HTTP API (default)")
    subparsers.add_parser("check-config", help="Show which AI provider would be used")
    return parser


def main() -> None:
    load_dotenv()
    parser = _build_parser()
    args = parser.parse_args()
    command = args.command or "serve"

    config = load_settings(args.settings)
    configure_logging(config)

    if command == "check-config":
        provider_config = resolve_provider_config()
        if provider_config is None:
            print(not_configured_message())
            return
        for key, value in provider_config.describe().items():
            print(f"{key:<9}= {value}")
        return

    server_cfg = config["server"]
    uvicorn.run(create_app(config), host=server_cfg["host"], port=int(server_cfg["port"]))


if __name__ == "__main__":
    main()
