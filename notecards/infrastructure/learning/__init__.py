"""Learning context infrastructure."""
