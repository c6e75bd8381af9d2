"""Allow running as `python -m jempradio`."""

from jempradio.cli import main

main()
