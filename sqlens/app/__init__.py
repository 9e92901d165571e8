"""Web application for sqlens."""
