"""Runtime configuration loaded from the environment and `.env`."""
