"""Platform integrations (logging, filesystem) shared by features."""
