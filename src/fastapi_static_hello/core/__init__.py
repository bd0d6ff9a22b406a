"""Framework-independent routing and static file resolution."""
