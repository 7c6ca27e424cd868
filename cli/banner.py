"""ASCII art banner for the CronScope CLI."""

BANNER = r"""
  ____                  ____
 / ___|_ __ ___  _ __  / ___|  ___ ___  _ __   ___
| |   | '__/ _ \| '_ \ \___ \ / __/ _ \| '_ \ / _ \
| |___| | | (_) | | | | ___) | (_| (_) | |_) |  __/
 \____|_|  \___/|_| |_||____/ \___\___/| .__/ \___|
                                       |_|
"""

TAGLINE = "Parse, explain and preview cron expressions"


def print_banner() -> None:
    """Print the banner and tagline."""
    print(BANNER)
    print(f"  {TAGLINE}")
    print()
