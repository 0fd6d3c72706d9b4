"""SVCS subcommand implementations."""
