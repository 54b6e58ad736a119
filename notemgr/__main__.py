"""Allow `python -m notemgr`."""

from notemgr.cli.main import cli

cli(prog_name="notemgr")
