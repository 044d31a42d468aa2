#!/usr/bin/env python3
"""
Interactive CLI demo for Ask Charlie.

Imports assume the package is installed (pip install -e .) or
PYTHONPATH=src is set.
"""
import logging

from ask_charlie.app import AskCharlieApp
from ask_charlie.config_loader import load_config_from_env

EXIT_COMMANDS = {"quit", "exit"}


def print_banner(welcome: str):
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print(f"  Ask Charlie - {welcome}")
    print("=" * 60)
    print("\nAsk me about:")
    print("  • Leave balances   (e.g. 'leave balance for Akhil')")
    print("  • Holidays         (e.g. 'when is the next holiday')")
    print("  • HR policies and FAQs")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def main():
    config = load_config_from_env()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    charlie = AskCharlieApp(config)
    charlie.initialize()
    print_banner(charlie.welcome())

    while True:
        try:
            query = input("You: ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if query.strip().lower() in EXIT_COMMANDS:
            break

        response = charlie.chat(query)
        print(f"Charlie: {response.answer}\n")

    print("Goodbye!")


if __name__ == "__main__":
    main()
