"""Allow ``python -m svcs``."""
from svcs.app import cli

cli()
