"""CLI commands for tasknote."""
