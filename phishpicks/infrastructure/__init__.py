"""Infrastructure layer - payload validation and the command line interface."""
