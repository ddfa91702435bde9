"""Interactive CLI for the registration form."""

from __future__ import annotations

import argparse
import getpass
import logging
import sys

from registration_form.config.loader import DEFAULT_CONFIG_PATH, load_config
from registration_form.orchestration.form import RegistrationForm

QUIT_WORDS = ("quit", "exit", "q")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Registration form interactive demo")
    p.add_argument("--config", "-c", default=str(DEFAULT_CONFIG_PATH), help="Path to form YAML config")
    p.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )
    return p.parse_args(argv)


def _read(prompt: str, secure: bool) -> str:
    if secure:
        return getpass.getpass(prompt)
    return input(prompt)


def run_interactive(form: RegistrationForm) -> bool:
    """Prompt for each field until valid. Return False if the user quit."""
    print(form.config.title)
    print(form.config.subtitle)
    print()
    for view in form.views():
        if view.disabled:
            continue
        if view.helper_text:
            print(f"  ({view.helper_text})")
        while True:
            form.focus(view.field_name)
            try:
                line = _read(f"{view.label}: ", view.secure)
            except EOFError:
                return False
            if line.strip().lower() in QUIT_WORDS:
                print("Goodbye.")
                return False
            # Secure values are compared byte-exact, so only plain fields are trimmed
            form.change(view.field_name, line if view.secure else line.strip())
            form.blur(view.field_name)
            current = form.field_view(view.field_name)
            if current.error_text:
                print(f"  ⚠️ {current.error_text}")
                continue
            if current.success_text:
                print(f"  ✓ {current.success_text}")
            break
    return True


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    form = RegistrationForm(config)
    if not run_interactive(form):
        return 0

    result = form.submit()
    print()
    print(result.title)
    print(result.message)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
